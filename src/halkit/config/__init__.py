# topmark:header:start
#
#   project      : HalKit
#   file         : __init__.py
#   file_relpath : src/halkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HalKit configuration: encoder settings, TOML loading and logging setup."""

from __future__ import annotations

from halkit.config.io import load_encoder_config
from halkit.config.model import EncoderConfig, MutableEncoderConfig

__all__ = [
    "EncoderConfig",
    "MutableEncoderConfig",
    "load_encoder_config",
]
