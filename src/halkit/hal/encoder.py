# topmark:header:start
#
#   project      : HalKit
#   file         : encoder.py
#   file_relpath : src/halkit/hal/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON encoder for HAL resources."""

from __future__ import annotations

from typing import ClassVar

from halkit.constants import HAL_JSON_MEDIA_TYPE
from halkit.core.encoder import JsonEncoder


class HalJsonEncoder(JsonEncoder):
    """Encode a `Resource` into an ``application/hal+json`` document."""

    media_type: ClassVar[str] = HAL_JSON_MEDIA_TYPE
