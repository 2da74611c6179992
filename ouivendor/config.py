from __future__ import annotations

import argparse
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from ouivendor.log import get_logger

logger = get_logger("config")


def config_paths() -> list[Path]:
    return [
        Path.home() / ".ouivendor.toml",
        Path("ouivendor.toml"),
    ]


def load_config() -> Dict[str, Any]:
    """
    Load configuration from:
    1. ~/.ouivendor.toml
    2. ./ouivendor.toml

    Later files override earlier ones; nested tables are merged.
    """
    config: Dict[str, Any] = {}
    for path in config_paths():
        if path.exists():
            try:
                with path.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("failed to load config %s: %s", path, e)
                continue
            _deep_update(config, data)

    return config


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and key in target and isinstance(target[key], dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def apply_config(
    parser: argparse.ArgumentParser,
    config: Dict[str, Any],
    commands: Optional[Dict[str, argparse.ArgumentParser]] = None,
    shared: Iterable[str] = (),
) -> None:
    """
    Apply configuration values to the argument parser defaults.

    Example config:
    [global]
    table = "vendors.json"

    [build]
    source = "oui.csv"
    output = "vendors.json"

    ``[global]`` values become defaults of the top-level parser. Global keys
    named in *shared* are also handed to every subcommand in *commands*, and
    a section named after a subcommand only feeds that subcommand. Keys must
    match argument destinations (``oui_column``, not ``--oui-column``).
    """
    defaults: Dict[str, Any] = dict(config.get("global", {}))
    parser.set_defaults(**defaults)

    for name, subparser in (commands or {}).items():
        sub_defaults = {key: defaults[key] for key in shared if key in defaults}
        section = config.get(name)
        if isinstance(section, dict):
            sub_defaults.update(section)
        if sub_defaults:
            subparser.set_defaults(**sub_defaults)
