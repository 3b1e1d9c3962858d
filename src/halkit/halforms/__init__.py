# topmark:header:start
#
#   project      : HalKit
#   file         : __init__.py
#   file_relpath : src/halkit/halforms/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL-FORMS document model and JSON encoder."""

from __future__ import annotations

from halkit.halforms.document import Document
from halkit.halforms.encoder import HalFormsJsonEncoder
from halkit.halforms.template import Options, Property, Template

__all__ = [
    "Document",
    "HalFormsJsonEncoder",
    "Options",
    "Property",
    "Template",
]
