# topmark:header:start
#
#   project      : HalKit
#   file         : keys.py
#   file_relpath : src/halkit/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reserved document keys and well-known relation names.

These names are part of the HAL and HAL-FORMS wire contract. Keep this module
behavior-free; it is a pure namespace for constants so it can be imported from
anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class HalKey:
    """Reserved top-level keys of HAL and HAL-FORMS documents."""

    LINKS: Final[str] = "_links"
    EMBEDDED: Final[str] = "_embedded"
    TEMPLATES: Final[str] = "_templates"


class Rel:
    """Well-known link relation names."""

    SELF: Final[str] = "self"
    CURIES: Final[str] = "curies"


# Keys a HAL resource injects itself; never copied from user properties.
HAL_RESERVED_KEYS: Final[frozenset[str]] = frozenset({HalKey.LINKS, HalKey.EMBEDDED})

# HAL-FORMS documents additionally own `_templates`.
HAL_FORMS_RESERVED_KEYS: Final[frozenset[str]] = HAL_RESERVED_KEYS | {HalKey.TEMPLATES}
