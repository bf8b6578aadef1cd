from __future__ import annotations

import copy
import json
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jsonpo.config import ConvertConfig  # noqa: E402


def _deep_merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_config_dict(overrides: dict | None = None) -> dict:
    base = {
        "default_mode": "wei18n",
        "project_id_version": "placeholder",
        "wrap_width": 0,
        "json_indent": 2,
    }
    if overrides:
        return _deep_merge(base, overrides)
    return base


def build_config(overrides: dict | None = None) -> ConvertConfig:
    return ConvertConfig.model_validate(build_config_dict(overrides))


def build_rainbeam_dict(data: dict[str, str], *, name: str = "hello", version: str = "0.1") -> dict:
    return {"name": name, "version": version, "data": dict(data)}


def write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path
