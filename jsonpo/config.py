from __future__ import annotations

from pathlib import Path
import json

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from jsonpo.constants import PROJECT_ID_VERSION, ConvertMode, ConvertModeLiteral


class _BaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ConvertConfig(_BaseModel):
    default_mode: ConvertModeLiteral = ConvertMode.WEI18N
    project_id_version: StrictStr = PROJECT_ID_VERSION
    wrap_width: StrictInt = Field(default=0, ge=0)
    json_indent: StrictInt = Field(default=2, ge=0)

    @field_validator("project_id_version")
    @classmethod
    def _project_id_version_single_line(cls, value: str) -> str:
        if "\n" in value:
            raise ValueError("project_id_version must be a single line")
        return value


def load_config(config_path: Path) -> ConvertConfig:
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"config not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"config is not valid JSON: {config_path}") from exc
    return ConvertConfig.model_validate(raw)
