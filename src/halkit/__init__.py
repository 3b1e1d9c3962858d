# topmark:header:start
#
#   project      : HalKit
#   file         : __init__.py
#   file_relpath : src/halkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HalKit package.

HalKit builds HAL and HAL-FORMS hypermedia documents. Callers assemble a graph of
resources, links and embedded resources, flatten it into an ordered mapping and
encode that mapping to JSON bytes.
"""

from __future__ import annotations

from halkit.errors import (
    ConfigError,
    CyclicEmbeddingError,
    EncodingError,
    HalkitError,
    InvalidArgumentError,
)
from halkit.hal import HalJsonEncoder, LinkObject, LinkRelation, Resource
from halkit.halforms import Document, HalFormsJsonEncoder, Options, Property, Template

__all__ = [
    "ConfigError",
    "CyclicEmbeddingError",
    "Document",
    "EncodingError",
    "HalFormsJsonEncoder",
    "HalJsonEncoder",
    "HalkitError",
    "InvalidArgumentError",
    "LinkObject",
    "LinkRelation",
    "Options",
    "Property",
    "Resource",
    "Template",
]
