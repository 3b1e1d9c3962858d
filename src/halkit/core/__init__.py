# topmark:header:start
#
#   project      : HalKit
#   file         : __init__.py
#   file_relpath : src/halkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Core infrastructure shared by the HAL and HAL-FORMS models.

Separation of concerns:

1) Reserved keys and relation names
   - [`halkit.core.keys`][halkit.core.keys]
2) Wire-shape projection of relation members (`One` / `Many`)
   - [`halkit.core.shapes`][halkit.core.shapes]
3) Serialization of flattened mappings (no model access)
   - [`halkit.core.serializers`][halkit.core.serializers]
4) Encoder boundary (`model.to_map()` then serialize)
   - [`halkit.core.encoder`][halkit.core.encoder]

Rule of thumb: if it needs `Resource` or `Document`, it does not belong here.
"""

from __future__ import annotations

from halkit.core.keys import HalKey, Rel
from halkit.core.shapes import Many, One, project

__all__ = [
    "HalKey",
    "Many",
    "One",
    "Rel",
    "project",
]
