# topmark:header:start
#
#   project      : HalKit
#   file         : template.py
#   file_relpath : src/halkit/halforms/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL-FORMS templates and property descriptors.

A `Template` describes one state transition (a form): the HTTP method, an
optional target and content type, and an ordered list of `Property` descriptors
carrying validation and rendering metadata. `Options` describes the allowed
values of a property, either inline or through a link.

These are structural descriptors only. Nothing here validates submitted values
or cross-checks templates against the properties of the owning document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from halkit.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from halkit.hal.link import LinkObject

DEFAULT_TEMPLATE_NAME: Final[str] = "default"
DEFAULT_CONTENT_TYPE: Final[str] = "application/json"


def _put(out: dict[str, object], key: str, value: object) -> None:
    if value is not None:
        out[key] = value


def _put_flag(out: dict[str, object], key: str, value: bool) -> None:
    if value:
        out[key] = True


@dataclass(frozen=True, slots=True)
class Options:
    """Allowed values of a template property.

    Attributes:
        inline (tuple[object, ...]): Inline values; plain values or
            ``{"prompt": ..., "value": ...}`` mappings.
        link (LinkObject | None): Link to a resource listing the values.
        prompt_field (str | None): Field of each option used as prompt.
        value_field (str | None): Field of each option used as value.
        selected_values (tuple[object, ...]): Pre-selected values.
        min_items (int | None): Minimum number of values to select.
        max_items (int | None): Maximum number of values to select.
    """

    inline: tuple[object, ...] = ()
    link: LinkObject | None = None
    prompt_field: str | None = None
    value_field: str | None = None
    selected_values: tuple[object, ...] = ()
    min_items: int | None = None
    max_items: int | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the HAL-FORMS ``options`` object."""
        out: dict[str, object] = {}
        if self.inline:
            out["inline"] = list(self.inline)
        if self.link is not None:
            out["link"] = self.link.to_dict()
        _put(out, "promptField", self.prompt_field)
        _put(out, "valueField", self.value_field)
        if self.selected_values:
            out["selectedValues"] = list(self.selected_values)
        _put(out, "minItems", self.min_items)
        _put(out, "maxItems", self.max_items)
        return out


@dataclass(frozen=True, slots=True)
class Property:
    """A HAL-FORMS template property descriptor.

    Only ``name`` is required. Attributes left at their default are omitted from
    the output; boolean flags only appear when True.

    Raises:
        InvalidArgumentError: If ``name`` is empty.
    """

    name: str
    prompt: str | None = None
    type: str | None = None
    required: bool = False
    read_only: bool = False
    templated: bool = False
    regex: str | None = None
    value: object = None
    placeholder: str | None = None
    min: float | None = None
    max: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    step: float | None = None
    cols: int | None = None
    rows: int | None = None
    options: Options | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidArgumentError("Template property requires a non-empty name")

    def to_dict(self) -> dict[str, object]:
        """Return the HAL-FORMS property object (camelCase wire names)."""
        out: dict[str, object] = {"name": self.name}
        _put(out, "prompt", self.prompt)
        _put(out, "type", self.type)
        _put_flag(out, "readOnly", self.read_only)
        _put(out, "regex", self.regex)
        _put_flag(out, "required", self.required)
        _put_flag(out, "templated", self.templated)
        _put(out, "value", self.value)
        _put(out, "placeholder", self.placeholder)
        _put(out, "min", self.min)
        _put(out, "max", self.max)
        _put(out, "minLength", self.min_length)
        _put(out, "maxLength", self.max_length)
        _put(out, "step", self.step)
        _put(out, "cols", self.cols)
        _put(out, "rows", self.rows)
        if self.options is not None:
            out["options"] = self.options.to_dict()
        return out


@dataclass
class Template:
    """A HAL-FORMS template (one available state transition).

    Attributes:
        method (str): HTTP method; stored upper-cased.
        name (str): Key under ``_templates``; ``"default"`` unless set.
        title (str | None): Human-readable title.
        content_type (str | None): Media type of the submitted body. HAL-FORMS
            clients assume ``application/json`` when absent.
        target (str | None): Submission URL; clients fall back to the ``self`` link.
        properties (list[Property]): Property descriptors, in insertion order.
    """

    method: str
    name: str = DEFAULT_TEMPLATE_NAME
    title: str | None = None
    content_type: str | None = None
    target: str | None = None
    properties: list[Property] = field(default_factory=lambda: [])

    def __post_init__(self) -> None:
        if not self.method:
            raise InvalidArgumentError("Template requires an HTTP method")
        if not self.name:
            raise InvalidArgumentError("Template requires a non-empty name")
        self.method = self.method.upper()

    def add_property(self, prop: Property) -> Template:
        """Append a property descriptor; return self for chaining."""
        self.properties.append(prop)
        return self

    def property_named(self, name: str) -> Property | None:
        """Return the first property called ``name``, or None."""
        return next((p for p in self.properties if p.name == name), None)

    def to_dict(self) -> dict[str, object]:
        """Return the HAL-FORMS template object.

        ``properties`` is always present, possibly empty.
        """
        out: dict[str, object] = {"method": self.method}
        _put(out, "title", self.title)
        _put(out, "contentType", self.content_type)
        _put(out, "target", self.target)
        out["properties"] = [p.to_dict() for p in self.properties]
        return out

    @classmethod
    def from_properties(
        cls,
        method: str,
        properties: Mapping[str, Mapping[str, object]],
        **kwargs: Any,
    ) -> Template:
        """Build a template from ``{name: {attribute: value}}`` descriptors.

        Attribute names are the `Property` field names (``read_only``, ...).
        """
        template = cls(method, **kwargs)
        for name, attrs in properties.items():
            template.add_property(Property(name, **attrs))
        return template
