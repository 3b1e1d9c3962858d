# topmark:header:start
#
#   project      : HalKit
#   file         : model.py
#   file_relpath : src/halkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder configuration model.

`EncoderConfig` is the immutable snapshot consumed by the JSON encoders.
`MutableEncoderConfig` is the builder used while reading TOML sources; call
`MutableEncoderConfig.freeze` to validate it and obtain an `EncoderConfig`, and
`EncoderConfig.thaw` to go back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from halkit.config.keys import ENCODER_KEYS, Toml
from halkit.config.logging import get_logger
from halkit.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Immutable JSON encoder settings.

    Attributes:
        indent (int | None): Pretty-print indentation; None produces compact output
            without whitespace between tokens.
        ensure_ascii (bool): Escape non-ASCII characters instead of emitting UTF-8.
        allow_nan (bool): Emit ``NaN``/``Infinity`` tokens (not valid JSON) instead of
            failing with an `EncodingError`.
    """

    indent: int | None = None
    ensure_ascii: bool = False
    allow_nan: bool = False

    def thaw(self) -> MutableEncoderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableEncoderConfig(
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            allow_nan=self.allow_nan,
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return this config as an ``[encoder]`` TOML table.

        ``indent`` is omitted when unset since TOML has no null value.
        """
        table: dict[str, Any] = {}
        if self.indent is not None:
            table[Toml.KEY_INDENT] = self.indent
        table[Toml.KEY_ENSURE_ASCII] = self.ensure_ascii
        table[Toml.KEY_ALLOW_NAN] = self.allow_nan
        return {Toml.SECTION_ENCODER: table}


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableEncoderConfig:
    """Mutable encoder settings used while merging configuration sources."""

    indent: int | None = None
    ensure_ascii: bool = False
    allow_nan: bool = False

    def freeze(self) -> EncoderConfig:
        """Validate this builder and freeze it into an `EncoderConfig`.

        Raises:
            InvalidArgumentError: If ``indent`` is negative.
        """
        if self.indent is not None and self.indent < 0:
            raise InvalidArgumentError(f"indent must be >= 0, got {self.indent}")
        return EncoderConfig(
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            allow_nan=self.allow_nan,
        )

    @classmethod
    def from_defaults(cls) -> MutableEncoderConfig:
        """Return a builder holding the default encoder settings."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any]) -> MutableEncoderConfig:
        """Build a builder from a parsed configuration mapping.

        ``data`` is the HalKit table, i.e. the document root of ``halkit.toml``
        or ``[tool.halkit]`` of ``pyproject.toml``. Only the ``[encoder]`` section
        is read. Unknown keys and values of the wrong type are logged and ignored.

        Args:
            data (Mapping[str, Any]): Parsed HalKit configuration table.

        Returns:
            MutableEncoderConfig: Builder with defaults overridden by ``data``.
        """
        m = cls.from_defaults()
        section: Any = data.get(Toml.SECTION_ENCODER, {})
        if not isinstance(section, dict):
            logger.warning("Ignoring [%s]: expected a table", Toml.SECTION_ENCODER)
            return m

        for key in section:
            if key not in ENCODER_KEYS:
                logger.warning("Ignoring unknown key [%s].%s", Toml.SECTION_ENCODER, key)

        indent: Any = section.get(Toml.KEY_INDENT)
        if indent is not None:
            if isinstance(indent, int) and not isinstance(indent, bool):
                m.indent = indent
            else:
                logger.warning("Ignoring %s=%r: expected an integer", Toml.KEY_INDENT, indent)

        for key in (Toml.KEY_ENSURE_ASCII, Toml.KEY_ALLOW_NAN):
            value: Any = section.get(key)
            if value is None:
                continue
            if isinstance(value, bool):
                setattr(m, key, value)
            else:
                logger.warning("Ignoring %s=%r: expected a boolean", key, value)

        logger.debug("Encoder config from TOML: %r", m)
        return m
