# topmark:header:start
#
#   project      : HalKit
#   file         : constants.py
#   file_relpath : src/halkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HalKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

HALKIT: str = "halkit"

try:
    HALKIT_VERSION: str = get_version(HALKIT)
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    HALKIT_VERSION = "0.0.0"

HAL_JSON_MEDIA_TYPE: str = "application/hal+json"
HAL_FORMS_JSON_MEDIA_TYPE: str = "application/prs.hal-forms+json"

# Environment variable consulted by `halkit.config.logging.setup_logging`.
LOG_LEVEL_ENV_VAR: str = "HALKIT_LOG_LEVEL"

# Configuration file names searched by `halkit.config.io`.
HALKIT_TOML_NAME: str = "halkit.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
