# topmark:header:start
#
#   project      : HalKit
#   file         : resource.py
#   file_relpath : src/halkit/hal/resource.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL resources and their flattening.

A `Resource` is built empty, mutated by its owner (properties, links, embedded
resources), then flattened with `Resource.to_map`. Flattening is a pure read:
it returns a fresh insertion-ordered mapping and never touches the graph, so
flattening an unmodified resource twice yields equal results.

Output key order:
    1. user properties, in insertion order (reserved keys skipped)
    2. ``_links``, when the resource has links, or embeds under CURIE relations
    3. ``_embedded``, when at least one resource is embedded

Relations holding one member render as a bare object, any other count as a list
(see [`halkit.core.shapes`][halkit.core.shapes]).

The resource graph is kept acyclic by `Resource.embed`, which rejects embedding
a resource that already (transitively) embeds the receiver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from halkit.config.logging import get_logger
from halkit.core.keys import HalKey
from halkit.core.shapes import project
from halkit.errors import CyclicEmbeddingError, InvalidArgumentError
from halkit.hal.model import LinkedModel
from halkit.hal.relation import LinkRelation

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


def _resource_to_map(resource: Resource) -> dict[str, object]:
    return resource.to_map()


class Resource(LinkedModel):
    """HAL resource: properties, links and embedded resources."""

    def __init__(self, properties: Mapping[str, object] | None = None) -> None:
        super().__init__(properties)
        self._embedded: dict[LinkRelation, list[Resource]] = {}

    def embed(self, relation: LinkRelation | str, *resources: Resource) -> None:
        """Embed one or more resources under ``relation``, in order.

        The same resource may be embedded several times (the graph may be a DAG),
        but never so that it ends up containing itself.

        Args:
            relation (LinkRelation | str): Relation (or relation name).
            *resources (Resource): Resources to append.

        Raises:
            InvalidArgumentError: If no resource is given, an item is not a `Resource`,
                or the relation's CURIE prefix is already bound to another link.
            CyclicEmbeddingError: If a resource is this resource or embeds it.
        """
        rel: LinkRelation = self.relation(relation)
        if not resources:
            raise InvalidArgumentError(f"embed({rel.full_name()!r}) requires at least one resource")
        for res in resources:
            if not isinstance(res, Resource):
                raise InvalidArgumentError(f"expected Resource, got {type(res).__name__}")
            if res.contains(self):
                raise CyclicEmbeddingError(
                    f"embedding under {rel.full_name()!r} would make the resource graph cyclic"
                )
        self._check_curie_bindings([rel.curie_link])
        self._embedded.setdefault(rel, []).extend(resources)
        logger.trace("Embedded %d resource(s) under %r", len(resources), rel.full_name())

    def embedded_for(self, relation: LinkRelation | str) -> list[Resource]:
        """Return the resources embedded under ``relation`` (matched by full name)."""
        full_name: str = (
            relation.full_name() if isinstance(relation, LinkRelation) else relation
        )
        return [
            res
            for rel, members in self._embedded.items()
            if rel.full_name() == full_name
            for res in members
        ]

    def contains(self, other: Resource) -> bool:
        """Return True if ``other`` is this resource or is reachable through embeds."""
        stack: list[Resource] = [self]
        visited: set[int] = set()
        while stack:
            node: Resource = stack.pop()
            if node is other:
                return True
            if id(node) in visited:
                continue
            visited.add(id(node))
            for members in node._embedded.values():
                stack.extend(members)
        return False

    def _relations_in_use(self) -> Iterable[LinkRelation]:
        return [*self._links.keys(), *self._embedded.keys()]

    def flatten_embedded(self) -> dict[str, object] | None:
        """Build the ``_embedded`` section, or None when nothing is embedded."""
        grouped: dict[str, list[Resource]] = {}
        for rel, members in self._embedded.items():
            grouped.setdefault(rel.full_name(), []).extend(members)
        if not grouped:
            return None
        return {
            name: project(members).render(_resource_to_map) for name, members in grouped.items()
        }

    def to_map(self) -> dict[str, object]:
        """Flatten this resource into an insertion-ordered mapping.

        Returns:
            dict[str, object]: Properties, then ``_links`` and ``_embedded`` when present.
        """
        content: dict[str, object] = self.flatten_properties()

        links: dict[str, object] | None = self.flatten_links()
        if links is not None:
            content[HalKey.LINKS] = links

        embedded: dict[str, object] | None = self.flatten_embedded()
        if embedded is not None:
            content[HalKey.EMBEDDED] = embedded

        logger.debug("Flattened resource into %d top-level key(s)", len(content))
        return content

    def __repr__(self) -> str:
        return (
            f"Resource(properties={len(self._properties)}, "
            f"relations={[rel.full_name() for rel in self._links]}, "
            f"embedded={[rel.full_name() for rel in self._embedded]})"
        )
