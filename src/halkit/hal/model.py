# topmark:header:start
#
#   project      : HalKit
#   file         : model.py
#   file_relpath : src/halkit/hal/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared state of HAL resources and HAL-FORMS documents.

`LinkedModel` holds what both document kinds have in common:

- ordered user properties,
- links grouped by relation, in registration order,
- explicitly declared CURIE links,

together with the flattening of properties and ``_links``. Subclasses add their
own reserved section (``_embedded`` or ``_templates``) in ``to_map()``.

Models are not thread-safe; build and flatten each instance from one owner.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from halkit.config.logging import get_logger
from halkit.core.keys import HAL_RESERVED_KEYS, Rel
from halkit.core.shapes import project
from halkit.errors import InvalidArgumentError
from halkit.hal.link import LinkObject
from halkit.hal.relation import LinkRelation

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


def _link_to_dict(link: LinkObject) -> dict[str, object]:
    return link.to_dict()


class LinkedModel:
    """Properties plus links, the common base of `Resource` and `Document`."""

    # Keys the subclass injects itself while flattening.
    reserved_keys: ClassVar[frozenset[str]] = HAL_RESERVED_KEYS

    def __init__(self, properties: Mapping[str, object] | None = None) -> None:
        self._properties: dict[str, object] = {}
        self._relations: dict[str, LinkRelation] = {}
        self._links: dict[LinkRelation, list[LinkObject]] = {}
        self._curies: list[LinkObject] = []
        if properties:
            self.set_properties(properties)

    # --- Properties ---

    @property
    def properties(self) -> Mapping[str, object]:
        """Read-only view of the user properties, in insertion order."""
        return MappingProxyType(self._properties)

    def set_property(self, name: str, value: object) -> None:
        """Set a property; re-setting an existing name keeps its original position.

        Reserved names are accepted but never reach the flattened output.
        """
        if name in self.reserved_keys:
            logger.warning(
                "Property %r is reserved and will be left out of the output", name
            )
        self._properties[name] = value
        logger.trace("Set property %r", name)

    def set_properties(self, properties: Mapping[str, object]) -> None:
        """Set several properties, in the mapping's iteration order."""
        for name, value in properties.items():
            self.set_property(name, value)

    def get_property(self, name: str, default: object = None) -> object:
        """Return the value of property ``name``, or ``default``."""
        return self._properties.get(name, default)

    def remove_property(self, name: str) -> None:
        """Remove property ``name`` if present."""
        self._properties.pop(name, None)

    # --- Relations & links ---

    def relation(self, relation: LinkRelation | str) -> LinkRelation:
        """Resolve ``relation`` to the `LinkRelation` registered on this model.

        Strings are resolved to one shared relation per name, created on first use.

        Raises:
            InvalidArgumentError: If ``relation`` is an empty string.
        """
        if isinstance(relation, LinkRelation):
            return relation
        existing: LinkRelation | None = self._relations.get(relation)
        if existing is None:
            existing = LinkRelation(relation)
            self._relations[relation] = existing
        return existing

    def add_link(self, relation: LinkRelation | str, *links: LinkObject) -> None:
        """Register one or more links under ``relation``, in order.

        Args:
            relation (LinkRelation | str): Relation (or relation name).
            *links (LinkObject): Links to append.

        Raises:
            InvalidArgumentError: If no link is given, an item is not a `LinkObject`,
                or the relation's CURIE prefix is already bound to another link.
        """
        rel: LinkRelation = self.relation(relation)
        if not links:
            raise InvalidArgumentError(f"add_link({rel.full_name()!r}) requires at least one link")
        for link in links:
            if not isinstance(link, LinkObject):
                raise InvalidArgumentError(f"expected LinkObject, got {type(link).__name__}")
        curie_links: list[LinkObject | None] = [rel.curie_link]
        if rel.full_name() == Rel.CURIES:
            curie_links.extend(links)
        self._check_curie_bindings(curie_links)
        self._links.setdefault(rel, []).extend(links)
        logger.trace("Added %d link(s) under %r", len(links), rel.full_name())

    def add_self_link(self, href: str, **attributes: Any) -> LinkObject:
        """Create and register a ``self`` link; return it.

        Args:
            href (str): Target of the self link.
            **attributes (Any): Further `LinkObject` attributes (``title``, ...).
        """
        link = LinkObject(href, **attributes)
        self.add_link(Rel.SELF, link)
        return link

    def add_curie(self, curie_link: LinkObject) -> None:
        """Declare a CURIE to be listed under ``_links.curies``.

        Raises:
            InvalidArgumentError: If ``curie_link`` has no name, or its prefix is
                already bound to another link on this model.
        """
        if not curie_link.name:
            raise InvalidArgumentError("CURIE links require a name (the CURIE prefix)")
        self._check_curie_bindings([curie_link])
        self._curies.append(curie_link)

    def links_for(self, relation: LinkRelation | str) -> list[LinkObject]:
        """Return the links registered under ``relation`` (matched by full name)."""
        full_name: str = (
            relation.full_name() if isinstance(relation, LinkRelation) else relation
        )
        return [
            link
            for rel, links in self._links.items()
            if rel.full_name() == full_name
            for link in links
        ]

    # --- CURIE bindings ---

    def _registered_curie_links(self) -> list[LinkObject]:
        """Links registered under the ``curies`` relation itself."""
        return [
            link
            for rel, links in self._links.items()
            if rel.full_name() == Rel.CURIES
            for link in links
        ]

    def _curie_candidates(self) -> list[LinkObject]:
        """CURIE links of this model, in listing order (may hold duplicates)."""
        candidates: list[LinkObject] = [*self._registered_curie_links(), *self._curies]
        candidates.extend(
            rel.curie_link for rel in self._relations_in_use() if rel.curie_link is not None
        )
        return candidates

    def _check_curie_bindings(self, curie_links: Iterable[LinkObject | None]) -> None:
        """Reject CURIE links whose prefix is already bound to a different link.

        Raises:
            InvalidArgumentError: On a conflicting binding.
        """
        bound: dict[str, LinkObject] = {}
        for link in self._curie_candidates():
            if link.name:
                bound.setdefault(link.name, link)
        for link in curie_links:
            if link is None or not link.name:
                continue
            existing: LinkObject = bound.setdefault(link.name, link)
            if existing != link:
                raise InvalidArgumentError(
                    f"CURIE prefix {link.name!r} is already bound to {existing.href!r}, "
                    f"cannot rebind it to {link.href!r}"
                )

    # --- Flattening ---

    def _relations_in_use(self) -> Iterable[LinkRelation]:
        """Relations whose CURIEs are listed under ``_links.curies``."""
        return self._links.keys()

    def _collect_curies(self) -> list[LinkObject]:
        """Return CURIE links to list, de-duplicated by prefix (first wins).

        A prefix bound to different links (possible when a CURIE is attached to a
        relation after registration) is logged; the first binding is listed.
        """
        seen: dict[str, LinkObject] = {}
        out: list[LinkObject] = []
        for link in self._curie_candidates():
            key: str = link.name or link.href
            first: LinkObject | None = seen.get(key)
            if first is None:
                seen[key] = link
                out.append(link)
            elif first != link:
                logger.warning(
                    "CURIE prefix %r is bound to both %r and %r; listing %r",
                    key,
                    first.href,
                    link.href,
                    first.href,
                )
        return out

    def flatten_properties(self) -> dict[str, object]:
        """Copy the user properties in insertion order, skipping reserved keys.

        Values are deep-copied, so edits to the output never reach the model.
        """
        return {
            k: copy.deepcopy(v) for k, v in self._properties.items() if k not in self.reserved_keys
        }

    def flatten_links(self) -> dict[str, object] | None:
        """Build the ``_links`` section, or None when there is nothing to list.

        Relations sharing a full name are merged in registration order. Links
        registered under the ``curies`` relation itself are folded into the CURIE
        list, which is always rendered as a list. Declared CURIEs alone, without
        any link or embedded resource, produce no section.
        """
        if not any(True for _ in self._relations_in_use()):
            return None

        grouped: dict[str, list[LinkObject]] = {}
        for rel, links in self._links.items():
            grouped.setdefault(rel.full_name(), []).extend(links)
        grouped.pop(Rel.CURIES, None)

        curies: list[LinkObject] = self._collect_curies()
        if not grouped and not curies:
            return None

        out: dict[str, object] = {
            name: project(links).render(_link_to_dict) for name, links in grouped.items()
        }
        if curies:
            out[Rel.CURIES] = [link.to_dict() for link in curies]
        return out
