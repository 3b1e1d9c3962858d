# topmark:header:start
#
#   project      : HalKit
#   file         : encoder.py
#   file_relpath : src/halkit/core/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder boundary shared by HAL and HAL-FORMS.

An encoder is stateless apart from its settings: it asks a model for its
flattened mapping and serializes that mapping. Encoders add no semantics of
their own; the only error they raise is `EncodingError`, propagated from the
serializer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from halkit.config.logging import get_logger
from halkit.config.model import EncoderConfig
from halkit.core.serializers import serialize_json_bytes, serialize_json_text

if TYPE_CHECKING:
    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)


@runtime_checkable
class Flattenable(Protocol):
    """Anything that can flatten itself into an ordered mapping."""

    def to_map(self) -> dict[str, object]:
        """Return the flattened, insertion-ordered mapping."""
        ...


class Encoder(Protocol):
    """Encode a flattened model into bytes."""

    media_type: str

    def encode(self, model: Flattenable) -> bytes:
        """Return the serialized form of ``model``."""
        ...


class JsonEncoder:
    """JSON encoder for any `Flattenable` model.

    Attributes:
        config (EncoderConfig): Serialization settings.
    """

    media_type: ClassVar[str] = "application/json"

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self.config: EncoderConfig = config if config is not None else EncoderConfig()

    def encode(self, model: Flattenable) -> bytes:
        """Flatten ``model`` and serialize it to UTF-8 JSON.

        Raises:
            EncodingError: If a flattened value cannot be represented as JSON.
        """
        content: dict[str, object] = model.to_map()
        logger.debug("Encoding %s as %s", type(model).__name__, self.media_type)
        return serialize_json_bytes(content, self.config)

    def encode_to_str(self, model: Flattenable) -> str:
        """Flatten ``model`` and serialize it to JSON text.

        Raises:
            EncodingError: If a flattened value cannot be represented as JSON.
        """
        return serialize_json_text(model.to_map(), self.config)
