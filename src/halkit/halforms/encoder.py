# topmark:header:start
#
#   project      : HalKit
#   file         : encoder.py
#   file_relpath : src/halkit/halforms/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON encoder for HAL-FORMS documents."""

from __future__ import annotations

from typing import ClassVar

from halkit.constants import HAL_FORMS_JSON_MEDIA_TYPE
from halkit.core.encoder import JsonEncoder


class HalFormsJsonEncoder(JsonEncoder):
    """Encode a `Document` into an ``application/prs.hal-forms+json`` document."""

    media_type: ClassVar[str] = HAL_FORMS_JSON_MEDIA_TYPE
