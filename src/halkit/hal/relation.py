# topmark:header:start
#
#   project      : HalKit
#   file         : relation.py
#   file_relpath : src/halkit/hal/relation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Link relations, optionally qualified by a CURIE.

A `LinkRelation` owns an optional CURIE `LinkObject` whose ``name`` is reused as
the CURIE prefix. The CURIE link only qualifies the relation name; it does not
make the relation itself a link.

Relations are mutable owners of their CURIE link, so they compare and hash by
identity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from halkit.config.logging import get_logger
from halkit.errors import InvalidArgumentError

if TYPE_CHECKING:
    from halkit.config.logging import HalkitLogger
    from halkit.hal.link import LinkObject

logger: HalkitLogger = get_logger(__name__)


class LinkRelation:
    """Named role a link or embedded resource plays for its owning resource."""

    __slots__ = ("_curie_link", "_name")

    def __init__(self, name: str) -> None:
        """Create a relation.

        Args:
            name (str): Bare relation name, e.g. ``"self"`` or ``"item"``.

        Raises:
            InvalidArgumentError: If ``name`` is empty.
        """
        if not name:
            raise InvalidArgumentError("LinkRelation requires a non-empty name")
        self._name: str = name
        self._curie_link: LinkObject | None = None

    @property
    def name(self) -> str:
        """The bare relation name, without CURIE prefix."""
        return self._name

    @property
    def curie_link(self) -> LinkObject | None:
        """The CURIE link qualifying this relation, or None."""
        return self._curie_link

    def has_curie_link(self) -> bool:
        """Return True if a CURIE link is attached."""
        return self._curie_link is not None

    def set_curie_link(self, curie_link: LinkObject) -> None:
        """Qualify this relation with a CURIE.

        Args:
            curie_link (LinkObject): CURIE declaration; its ``name`` is the prefix.

        Raises:
            InvalidArgumentError: If ``curie_link`` has no name.
        """
        if not curie_link.name:
            raise InvalidArgumentError(
                f"CURIE link for relation {self._name!r} requires a name (the CURIE prefix)"
            )
        self._curie_link = curie_link
        logger.trace("Relation %r qualified with CURIE %r", self._name, curie_link.name)

    def full_name(self) -> str:
        """Return ``"<curie>:<name>"`` when a CURIE is attached, else the bare name."""
        if self._curie_link is None:
            return self._name
        return f"{self._curie_link.name}:{self._name}"

    def __repr__(self) -> str:
        return f"LinkRelation({self.full_name()!r})"
