# topmark:header:start
#
#   project      : HalKit
#   file         : link.py
#   file_relpath : src/halkit/hal/link.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL Link Object.

A `LinkObject` is a plain value object: it does not interpret or validate its
``href`` (URI templates included), it only carries the HAL link attributes to
the output. When used as a CURIE declaration its ``name`` is the CURIE prefix
and its ``href`` is the templated documentation URI.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from halkit.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping


class LinkKey:
    """HAL Link Object attribute names, in output order."""

    HREF: Final[str] = "href"
    TEMPLATED: Final[str] = "templated"
    TYPE: Final[str] = "type"
    DEPRECATION: Final[str] = "deprecation"
    NAME: Final[str] = "name"
    PROFILE: Final[str] = "profile"
    TITLE: Final[str] = "title"
    HREFLANG: Final[str] = "hreflang"


STANDARD_LINK_KEYS: Final[frozenset[str]] = frozenset(
    {
        LinkKey.HREF,
        LinkKey.TEMPLATED,
        LinkKey.TYPE,
        LinkKey.DEPRECATION,
        LinkKey.NAME,
        LinkKey.PROFILE,
        LinkKey.TITLE,
        LinkKey.HREFLANG,
    }
)


@dataclass(frozen=True, slots=True)
class LinkObject:
    """A single hypermedia link.

    Attributes:
        href (str): URI or URI template of the target. Passed through unchanged.
        templated (bool): Whether ``href`` is a URI template.
        type (str | None): Media type hint for the target resource.
        deprecation (str | None): URL describing the deprecation of this link.
        name (str | None): Secondary key for selecting links of one relation; the
            prefix when the link declares a CURIE.
        profile (str | None): Profile URI of the target resource.
        title (str | None): Human-readable label.
        hreflang (str | None): Language of the target resource.
        extra (Mapping[str, object]): Further attributes, rendered after the standard
            ones in insertion order. Held as a read-only copy and left out of the
            hash.
    """

    href: str
    templated: bool = False
    type: str | None = None
    deprecation: str | None = None
    name: str | None = None
    profile: str | None = None
    title: str | None = None
    hreflang: str | None = None
    extra: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        clashes: list[str] = [key for key in self.extra if key in STANDARD_LINK_KEYS]
        if clashes:
            raise InvalidArgumentError(
                f"extra link attributes shadow standard ones: {', '.join(clashes)}"
            )
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __copy__(self) -> LinkObject:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> LinkObject:
        return self

    def to_dict(self) -> dict[str, object]:
        """Return the link attribute map.

        ``href`` comes first; optional attributes follow in declaration order and
        are only present when set. ``templated`` is only present when True. Extra
        attributes come last.
        """
        out: dict[str, object] = {LinkKey.HREF: self.href}
        if self.templated:
            out[LinkKey.TEMPLATED] = True
        optional: tuple[tuple[str, str | None], ...] = (
            (LinkKey.TYPE, self.type),
            (LinkKey.DEPRECATION, self.deprecation),
            (LinkKey.NAME, self.name),
            (LinkKey.PROFILE, self.profile),
            (LinkKey.TITLE, self.title),
            (LinkKey.HREFLANG, self.hreflang),
        )
        for key, value in optional:
            if value is not None:
                out[key] = value
        for key, value in self.extra.items():
            out[key] = copy.deepcopy(value)
        return out
