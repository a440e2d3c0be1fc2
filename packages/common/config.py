from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

MILLIS_SEPARATORS = (".", ":")


class EncoderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # 3 digits + "." is ISO-8601 and round-trips through decode().
    # 2 digits + ":" reproduces the legacy layout (YYYY-MM-DDTHH:mm:ss:msZ).
    millis_digits: int = 3
    millis_separator: str = "."

    @field_validator("millis_digits")
    @classmethod
    def _validate_digits(cls, v: int) -> int:
        if v not in (2, 3):
            raise ValueError(f"encoder.millis_digits must be 2 or 3 (got {v})")
        return v

    @field_validator("millis_separator")
    @classmethod
    def _validate_separator(cls, v: str) -> str:
        if v not in MILLIS_SEPARATORS:
            raise ValueError(f"encoder.millis_separator must be one of {MILLIS_SEPARATORS} (got {v!r})")
        return v

    @property
    def round_trips(self) -> bool:
        return self.millis_digits == 3 and self.millis_separator == "."

    @classmethod
    def legacy(cls) -> "EncoderConfig":
        return cls(millis_digits=2, millis_separator=":")


class CodecConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)


def _maybe_load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure in {path}")
    return data


def load_codec_config(path: Path = Path("config/codec.yaml")) -> CodecConfig:
    raw = _maybe_load_yaml(Path(path))
    if not raw:
        return CodecConfig()

    cfg = CodecConfig.model_validate(raw)
    logger.info(
        "Codec config loaded path={} millis_digits={} millis_separator={!r}",
        path,
        cfg.encoder.millis_digits,
        cfg.encoder.millis_separator,
    )
    return cfg
