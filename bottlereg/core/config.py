# SPDX-License-Identifier: LGPL-3.0-or-later
# bottlereg/core/config.py
# -*- coding: utf-8 -*-
"""Reader configuration: snapshot file names and fallback defaults"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..wine.types import DEFAULT_AUDIO_DRIVER, DEFAULT_WINDOWS, AudioDriver, Windows, windows_from_token
from .exceptions import wrap_config

logger = logging.getLogger("bottlereg.config")

CONFIG_ENV_VAR = "BOTTLEREG_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Snapshot files inside a prefix
    "files": {
        "user_reg": "user.reg",
        "system_reg": "system.reg",
        "update_timestamp": ".update-timestamp",
    },
    # Used when the registry does not say (Wine's own defaults)
    "defaults": {
        "windows": "win7",
        "audio_driver": "pulse",
    },
}


@dataclass(frozen=True)
class ReaderConfig:
    user_reg: str = "user.reg"
    system_reg: str = "system.reg"
    update_timestamp: str = ".update-timestamp"
    default_windows: Windows = DEFAULT_WINDOWS
    default_audio_driver: AudioDriver = DEFAULT_AUDIO_DRIVER

    def user_reg_path(self, prefix_path: Union[str, Path]) -> Path:
        return Path(prefix_path) / self.user_reg

    def system_reg_path(self, prefix_path: Union[str, Path]) -> Path:
        return Path(prefix_path) / self.system_reg


def _deep_merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """dicts deep-merge, everything else is replaced"""
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge_dict(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _read_structured_file(path: Path) -> Dict[str, Any]:
    """
    Read a JSON/YAML file into a dict.

    Supported:
      - *.json
      - *.yml / *.yaml
      - anything else: JSON first, then YAML
    """
    sfx = path.suffix.lower()
    raw = path.read_text(encoding="utf-8", errors="replace")
    if sfx == ".json":
        parsed = json.loads(raw)
    elif sfx in (".yml", ".yaml"):
        parsed = yaml.safe_load(raw)
    else:
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = yaml.safe_load(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("top-level config must be a mapping/object (dict)")
    return parsed


def _validate_config(cfg: Dict[str, Any]) -> ReaderConfig:
    files = cfg.get("files") or {}
    defaults = cfg.get("defaults") or {}
    if not isinstance(files, dict) or not isinstance(defaults, dict):
        raise wrap_config("'files' and 'defaults' must be mappings")

    for key in ("user_reg", "system_reg", "update_timestamp"):
        v = files.get(key)
        if not isinstance(v, str) or not v.strip():
            raise wrap_config(f"files.{key} must be a non-empty string", value=v)
        if "/" in v or "\\" in v:
            raise wrap_config(f"files.{key} must be a plain file name", value=v)

    windows = windows_from_token(str(defaults.get("windows", "")).strip())
    if windows is None:
        raise wrap_config("defaults.windows is not a known Windows version token", value=defaults.get("windows"))

    audio = AudioDriver.from_token(str(defaults.get("audio_driver", "")).strip())
    if audio is None:
        raise wrap_config("defaults.audio_driver is not a known audio driver", value=defaults.get("audio_driver"))

    return ReaderConfig(
        user_reg=files["user_reg"].strip(),
        system_reg=files["system_reg"].strip(),
        update_timestamp=files["update_timestamp"].strip(),
        default_windows=windows,
        default_audio_driver=audio,
    )


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ReaderConfig:
    """
    Build a ReaderConfig from, in increasing priority:

    1) baked DEFAULT_CONFIG
    2) a JSON/YAML file: `path`, or $BOTTLEREG_CONFIG when path is None
    3) `overrides` (same shape as DEFAULT_CONFIG)

    Nothing is cached; every call re-reads the file.
    """
    cfg: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is not None:
        fp = Path(path).expanduser()
        try:
            parsed = _read_structured_file(fp)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise wrap_config(f"cannot load config file: {fp}", e, path=str(fp)) from e
        cfg = _deep_merge_dict(cfg, parsed)
        logger.debug("Loaded reader config from %s", fp)

    if overrides:
        cfg = _deep_merge_dict(cfg, overrides)

    return _validate_config(cfg)


DEFAULT_READER_CONFIG = ReaderConfig()


def resolve_config(config: Optional[ReaderConfig]) -> ReaderConfig:
    return config if config is not None else DEFAULT_READER_CONFIG
