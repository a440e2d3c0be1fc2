# packages/common/tests/test_config.py

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.common.config import CodecConfig, EncoderConfig, load_codec_config


def _write_tmp(text: str) -> Path:
    with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False) as tmp:
        tmp.write(text)
        return Path(tmp.name)


def test_defaults_are_iso_compliant():
    cfg = CodecConfig()
    assert cfg.encoder.millis_digits == 3
    assert cfg.encoder.millis_separator == "."
    assert cfg.encoder.round_trips


def test_legacy_layout():
    legacy = EncoderConfig.legacy()
    assert legacy.millis_digits == 2
    assert legacy.millis_separator == ":"
    assert not legacy.round_trips


def test_missing_file_gives_defaults():
    with tempfile.TemporaryDirectory() as d:
        assert load_codec_config(Path(d) / "nope.yaml") == CodecConfig()


def test_empty_file_gives_defaults():
    path = _write_tmp("")
    try:
        assert load_codec_config(path) == CodecConfig()
    finally:
        os.remove(path)


def test_loads_encoder_section():
    path = _write_tmp("encoder:\n  millis_digits: 2\n  millis_separator: ':'\n")
    try:
        cfg = load_codec_config(path)
        assert cfg.encoder == EncoderConfig.legacy()
    finally:
        os.remove(path)


def test_non_mapping_yaml_is_rejected():
    path = _write_tmp("- just\n- a list\n")
    try:
        with pytest.raises(ValueError, match="Invalid YAML structure"):
            load_codec_config(path)
    finally:
        os.remove(path)


@pytest.mark.parametrize(
    "body",
    [
        "encoder:\n  millis_digits: 4\n",
        "encoder:\n  millis_separator: ','\n",
    ],
)
def test_invalid_values_are_rejected(body: str):
    path = _write_tmp(body)
    try:
        with pytest.raises(ValidationError):
            load_codec_config(path)
    finally:
        os.remove(path)


def test_config_is_frozen():
    cfg = EncoderConfig()
    with pytest.raises(ValidationError):
        cfg.millis_digits = 2  # type: ignore[misc]
