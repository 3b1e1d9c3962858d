# topmark:header:start
#
#   project      : HalKit
#   file         : document.py
#   file_relpath : src/halkit/halforms/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL-FORMS documents.

A `Document` has the same properties and ``_links`` as a HAL resource, plus
named templates rendered under ``_templates``. Flattening follows the same
rules as [`halkit.hal.resource`][halkit.hal.resource]:

    1. user properties, in insertion order (reserved keys skipped)
    2. ``_links``, when the document has links or CURIEs
    3. ``_templates``, when at least one template was added

HAL-FORMS clients expect a ``self`` link; like resources, documents leave that
to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from halkit.config.logging import get_logger
from halkit.core.keys import HAL_FORMS_RESERVED_KEYS, HalKey
from halkit.errors import InvalidArgumentError
from halkit.hal.model import LinkedModel
from halkit.halforms.template import Template

if TYPE_CHECKING:
    from collections.abc import Mapping

    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


class Document(LinkedModel):
    """HAL-FORMS document: properties, links and templates."""

    reserved_keys: ClassVar[frozenset[str]] = HAL_FORMS_RESERVED_KEYS

    def __init__(self, properties: Mapping[str, object] | None = None) -> None:
        super().__init__(properties)
        self._templates: dict[str, Template] = {}

    @property
    def templates(self) -> list[Template]:
        """Templates in insertion order."""
        return list(self._templates.values())

    def add_template(self, template: Template) -> None:
        """Register a template under its name.

        Raises:
            InvalidArgumentError: If a template with the same name already exists.
        """
        if not isinstance(template, Template):
            raise InvalidArgumentError(f"expected Template, got {type(template).__name__}")
        if template.name in self._templates:
            raise InvalidArgumentError(f"duplicate template name {template.name!r}")
        self._templates[template.name] = template
        logger.trace("Added template %r (%s)", template.name, template.method)

    def template(self, name: str) -> Template | None:
        """Return the template called ``name``, or None."""
        return self._templates.get(name)

    def flatten_templates(self) -> dict[str, object] | None:
        """Build the ``_templates`` section, or None when there is no template."""
        if not self._templates:
            return None
        return {name: template.to_dict() for name, template in self._templates.items()}

    def to_map(self) -> dict[str, object]:
        """Flatten this document into an insertion-ordered mapping.

        Returns:
            dict[str, object]: Properties, then ``_links`` and ``_templates`` when present.
        """
        content: dict[str, object] = self.flatten_properties()

        links: dict[str, object] | None = self.flatten_links()
        if links is not None:
            content[HalKey.LINKS] = links

        templates: dict[str, object] | None = self.flatten_templates()
        if templates is not None:
            content[HalKey.TEMPLATES] = templates

        logger.debug("Flattened HAL-FORMS document into %d top-level key(s)", len(content))
        return content
