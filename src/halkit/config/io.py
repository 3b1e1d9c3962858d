# topmark:header:start
#
#   project      : HalKit
#   file         : io.py
#   file_relpath : src/halkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load HalKit configuration from TOML sources.

Two sources are understood:
- ``halkit.toml``: the document root is the HalKit table.
- ``pyproject.toml``: the HalKit table lives under ``[tool.halkit]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from halkit.config.keys import Toml
from halkit.config.logging import get_logger
from halkit.config.model import EncoderConfig, MutableEncoderConfig
from halkit.constants import HALKIT_TOML_NAME, PYPROJECT_TOML_NAME
from halkit.errors import ConfigError

if TYPE_CHECKING:
    from halkit.config.logging import HalkitLogger

logger: HalkitLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``halkit.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_halkit_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the HalKit table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.halkit]`` (empty when absent); for any
    other file the document root is returned.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    table: Any = tool.get(Toml.SECTION_HALKIT, {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def find_config_file(start: Path) -> Path | None:
    """Find the nearest HalKit configuration file, walking up from ``start``.

    In each directory ``halkit.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it holds a ``[tool.halkit]`` table. An
    unreadable or malformed ``pyproject.toml`` met during the search is logged
    and skipped.
    """
    start = start.resolve()
    directory: Path = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        halkit_toml: Path = candidate_dir / HALKIT_TOML_NAME
        if halkit_toml.is_file():
            return halkit_toml
        pyproject: Path = candidate_dir / PYPROJECT_TOML_NAME
        if not pyproject.is_file():
            continue
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigError as e:
            logger.warning("Skipping %s while searching for HalKit configuration: %s", pyproject, e)
            continue
        if extract_halkit_table(pyproject, data):
            return pyproject
    return None


def load_encoder_config(path: Path | None = None) -> EncoderConfig:
    """Load encoder settings from a configuration file.

    Args:
        path (Path | None): Explicit ``halkit.toml``/``pyproject.toml`` path, or a
            directory to search upward from. None searches from the current
            working directory.

    Returns:
        EncoderConfig: Frozen settings; defaults when no configuration file is found.

    Raises:
        ConfigError: If the configuration file is unreadable or malformed.
    """
    config_file: Path | None
    if path is not None and path.is_file():
        config_file = path
    else:
        config_file = find_config_file(path if path is not None else Path.cwd())

    if config_file is None:
        logger.debug("No HalKit configuration found; using defaults")
        return MutableEncoderConfig.from_defaults().freeze()

    logger.debug("Loading HalKit configuration from %s", config_file)
    table: TomlTable = extract_halkit_table(config_file, load_toml_dict(config_file))
    return MutableEncoderConfig.from_toml_dict(table).freeze()
