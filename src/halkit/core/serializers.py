# topmark:header:start
#
#   project      : HalKit
#   file         : serializers.py
#   file_relpath : src/halkit/core/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON serialization utilities for flattened documents.

This module converts *already-flattened* document mappings (the output of
``Resource.to_map()`` / ``Document.to_map()``) into JSON.

It is intentionally:
- model-free (it never calls back into resources or documents)
- side-effect-free (serialization only)

Normalization rules applied before serialization:
- `Enum` -> `Enum.value`
- `Path` -> `str`
- objects with `.to_dict()` -> normalize of that mapping
- mappings -> dict with normalized values (keys are left to the serializer)
- tuples/sets -> lists of normalized values

Anything else is handed to `json.dumps` unchanged; values it cannot represent
surface as `EncodingError`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

from halkit.config.logging import get_logger
from halkit.config.model import EncoderConfig
from halkit.errors import EncodingError

if TYPE_CHECKING:
    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


def normalize_payload(obj: object) -> object:
    """Normalize a flattened document value into JSON-serializable structures.

    Args:
        obj (object): The value to normalize.

    Returns:
        object: A JSON-friendly representation of ``obj``, or ``obj`` itself when
            no conversion applies.
    """
    if isinstance(obj, Enum):
        return normalize_payload(obj.value)

    if isinstance(obj, PurePath):
        return str(obj)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {k: normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def serialize_json_text(content: Mapping[str, object], config: EncoderConfig | None = None) -> str:
    """Serialize a flattened document mapping to JSON text.

    Key order follows the mapping's iteration order; keys are never sorted.

    Args:
        content (Mapping[str, object]): Flattened document mapping.
        config (EncoderConfig | None): Encoder settings; defaults produce compact output.

    Returns:
        str: JSON text (no trailing newline).

    Raises:
        EncodingError: If a value cannot be represented as JSON.
    """
    cfg: EncoderConfig = config if config is not None else EncoderConfig()
    separators: tuple[str, str] = (",", ":") if cfg.indent is None else (",", ": ")
    try:
        normalized: object = normalize_payload(content)
        return json.dumps(
            normalized,
            indent=cfg.indent,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=cfg.allow_nan,
            separators=separators,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("JSON serialization failed: %s", exc)
        raise EncodingError(f"Cannot encode document as JSON: {exc}") from exc


def serialize_json_bytes(
    content: Mapping[str, object], config: EncoderConfig | None = None
) -> bytes:
    """Serialize a flattened document mapping to UTF-8 encoded JSON.

    Args:
        content (Mapping[str, object]): Flattened document mapping.
        config (EncoderConfig | None): Encoder settings.

    Returns:
        bytes: UTF-8 JSON.

    Raises:
        EncodingError: If a value cannot be represented as JSON or as UTF-8.
    """
    text: str = serialize_json_text(content, config)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        # Lone surrogates survive json.dumps(ensure_ascii=False).
        raise EncodingError(f"Cannot encode document as UTF-8: {exc}") from exc
