"""Tests for configuration loading."""

import io
import tempfile

import pytest

from specreport.core.config import FormatConfig
from specreport.core.models import ColorMode


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_format_config_defaults():
    config = FormatConfig()
    assert config.formatter == "specdoc"
    assert config.color == ColorMode.AUTO
    assert config.html is False
    assert config.log_level == "INFO"


def test_format_config_from_dict():
    data = {"formatter": "progress", "color": "always", "html": True, "log_level": "DEBUG"}
    config = FormatConfig.from_dict(data)
    assert config.formatter == "progress"
    assert config.color == ColorMode.ALWAYS
    assert config.html is True
    assert config.log_level == "DEBUG"


def test_format_config_from_yaml():
    yaml_content = """
formatter: failed-examples
color: no
html: false
"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(yaml_content)
        f.flush()

        config = FormatConfig.from_yaml(f.name)

    assert config.formatter == "failed-examples"
    assert config.color == ColorMode.NEVER
    assert config.html is False


def test_format_config_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    config = FormatConfig.from_yaml(path)
    assert config.formatter == "specdoc"


def test_unknown_color_mode():
    with pytest.raises(ValueError, match="Unknown color mode"):
        FormatConfig.from_dict({"color": "sometimes"})


def test_merge_overrides():
    config = FormatConfig()
    config.merge_overrides(formatter="progress", color="never", html=True)
    assert config.formatter == "progress"
    assert config.color == ColorMode.NEVER
    assert config.html is True


def test_merge_overrides_none_values():
    config = FormatConfig(formatter="silent", color=ColorMode.ALWAYS)
    config.merge_overrides()
    assert config.formatter == "silent"
    assert config.color == ColorMode.ALWAYS
    assert config.html is False


def test_use_color_for():
    assert FormatConfig(color="always").use_color_for(io.StringIO()) is True
    assert FormatConfig(color="never").use_color_for(_TTY()) is False
    assert FormatConfig(color="auto").use_color_for(_TTY()) is True
    assert FormatConfig(color="auto").use_color_for(io.StringIO()) is False
