"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from mdmend.config import load_config


def test_load_config_defaults():
    """Test loading config with defaults when no file exists."""
    config = load_config()

    assert config.preprocess.single_dollar_text_math is False
    assert config.preprocess.fix_html is False
    assert config.stream.mode == "streaming"
    assert config.stream.chunk_size == 1
    assert config.parser.preset == "commonmark"
    assert config.logging.verbose is False
    assert config.logging.file is None


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "mdmend.toml"
        config_path.write_text("""
[preprocess]
single_dollar_text_math = true
fix_html = true

[stream]
mode = "static"
chunk_size = 8

[parser]
preset = "gfm-like"

[logging]
verbose = true
file = "run.log"

[unknown]
key = 1
""")

        config = load_config(config_path=config_path)

        assert config.preprocess.single_dollar_text_math is True
        assert config.preprocess.fix_html is True
        assert config.stream.mode == "static"
        assert config.stream.chunk_size == 8
        assert config.parser.preset == "gfm-like"
        assert config.logging.verbose is True
        assert config.logging.file == "run.log"

        options = config.preprocess.options()
        assert options.single_dollar_text_math is True
        assert options.fix_html is True


def test_load_config_invalid_mode():
    """Test an unsupported stream mode is rejected."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "mdmend.toml"
        config_path.write_text('[stream]\nmode = "fast"\n')

        with pytest.raises(ValueError):
            load_config(config_path=config_path)


def test_load_config_missing_file_uses_defaults():
    """Test a nonexistent explicit path falls back to defaults."""
    config = load_config(config_path=Path("/nonexistent/mdmend.toml"))
    assert config.stream.mode == "streaming"
