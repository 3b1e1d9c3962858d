# topmark:header:start
#
#   project      : HalKit
#   file         : errors.py
#   file_relpath : src/halkit/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for HalKit.

Usage:
    Model constructors raise `InvalidArgumentError` synchronously; no partially
    built object is ever returned. `EncodingError` is only raised at the encoder
    boundary, never by flattening.

Hierarchy:
    HalkitError
    ├── InvalidArgumentError (also a ValueError)
    │   └── CyclicEmbeddingError
    ├── EncodingError
    └── ConfigError
"""

from __future__ import annotations


class HalkitError(Exception):
    """Base class for all HalKit errors."""


class InvalidArgumentError(HalkitError, ValueError):
    """Error for invalid constructor or mutator arguments (e.g. an empty relation name)."""


class CyclicEmbeddingError(InvalidArgumentError):
    """Error when embedding a resource would make the resource graph cyclic."""


class EncodingError(HalkitError):
    """Error when a flattened document cannot be represented by the target serialization."""


class ConfigError(HalkitError):
    """Error for configuration errors (unreadable or malformed TOML)."""
