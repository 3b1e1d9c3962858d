# topmark:header:start
#
#   project      : HalKit
#   file         : __init__.py
#   file_relpath : src/halkit/hal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HAL document model: relations, links, resources and the HAL JSON encoder."""

from __future__ import annotations

from halkit.hal.encoder import HalJsonEncoder
from halkit.hal.link import LinkObject
from halkit.hal.relation import LinkRelation
from halkit.hal.resource import Resource

__all__ = [
    "HalJsonEncoder",
    "LinkObject",
    "LinkRelation",
    "Resource",
]
