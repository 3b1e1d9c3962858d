# topmark:header:start
#
#   project      : HalKit
#   file         : keys.py
#   file_relpath : src/halkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for HalKit configuration.

Keys defined here are the external configuration API, as it appears in
``halkit.toml`` and in ``[tool.halkit]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by HalKit configuration."""

    # [tool.halkit] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_HALKIT: Final[str] = "halkit"

    # [encoder]
    SECTION_ENCODER: Final[str] = "encoder"

    KEY_INDENT: Final[str] = "indent"
    KEY_ENSURE_ASCII: Final[str] = "ensure_ascii"
    KEY_ALLOW_NAN: Final[str] = "allow_nan"


ENCODER_KEYS: Final[frozenset[str]] = frozenset(
    {
        Toml.KEY_INDENT,
        Toml.KEY_ENSURE_ASCII,
        Toml.KEY_ALLOW_NAN,
    }
)
