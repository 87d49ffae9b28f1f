# ledger_tracker/config.py
from __future__ import annotations

import codecs
import copy
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml

from ledger_tracker.core.errors import FileAccessError, ValidationError
from ledger_tracker.loaders.ledger_file import POLICIES

DEFAULT_CONFIG: Dict[str, object] = {
    "currency_symbol": "₹",
    "on_parse_error": "abort",
    "encoding": "utf-8",
    "load_files": [],
    "log_level": "WARNING",
}

DEFAULT_CONFIG_PATH = Path("ledgerly.yaml")

# Environment variable -> config key, applied after the YAML file
ENV_OVERRIDES = {
    "LEDGER_CURRENCY_SYMBOL": "currency_symbol",
    "LEDGER_ON_PARSE_ERROR": "on_parse_error",
    "LEDGER_LOG_LEVEL": "log_level",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: Optional[Path] = None) -> Dict[str, object]:
    """
    Read the YAML config at ``path`` (or ``ledgerly.yaml`` in the working
    directory), fill in defaults and apply environment overrides.
    A missing file just yields the defaults.
    """
    target = Path(path) if path else DEFAULT_CONFIG_PATH
    data: Dict[str, object] = {}
    if target.exists():
        try:
            with target.open("r", encoding="utf-8") as fp:
                data = yaml.safe_load(fp) or {}
        except OSError as e:
            raise FileAccessError(target, e.strerror or str(e)) from e
        if not isinstance(data, dict):
            raise ValidationError(f"Config file {target} must contain a mapping")

    config = _merge_defaults(data, DEFAULT_CONFIG)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[key] = value

    _validate(config)
    return config


def _validate(config: Dict[str, object]) -> None:
    if config["on_parse_error"] not in POLICIES:
        raise ValidationError(
            f"on_parse_error must be one of {POLICIES}, got '{config['on_parse_error']}'"
        )
    load_files = config["load_files"]
    if isinstance(load_files, str):
        config["load_files"] = [load_files]
    elif not isinstance(load_files, list):
        raise ValidationError("load_files must be a list of file paths")
    level = str(config["log_level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValidationError(f"Unknown log_level '{config['log_level']}'")
    config["log_level"] = level
    config["currency_symbol"] = str(config["currency_symbol"])
    try:
        codecs.lookup(str(config["encoding"]))
    except LookupError:
        raise ValidationError(f"Unknown encoding '{config['encoding']}'")
