"""Tests for configuration loading."""

import pytest
from pathlib import Path

from gotodir.config import load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ["GOTO_DB", "GOTO_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")
        assert config.db_path == Path.home() / ".goto"
        assert config.log_level == "WARNING"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GOTO_DB", str(tmp_path / "aliases"))
        monkeypatch.setenv("GOTO_LOG_LEVEL", "DEBUG")

        config = load_config(tmp_path / "missing.toml")
        assert config.db_path == tmp_path / "aliases"
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "gotodir.toml"
        toml_path.write_text(f"""
db_path = "{tmp_path / 'from-toml'}"
log_level = "INFO"
""")
        config = load_config(toml_path)
        assert config.db_path == tmp_path / "from-toml"
        assert config.log_level == "INFO"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GOTO_DB", str(tmp_path / "from-env"))

        toml_path = tmp_path / "gotodir.toml"
        toml_path.write_text('db_path = "/from/toml"\n')
        config = load_config(toml_path)
        assert config.db_path == tmp_path / "from-env"  # env wins

    def test_tilde_expanded(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("GOTO_DB", "~/aliases")

        config = load_config(tmp_path / "missing.toml")
        assert config.db_path == tmp_path / "aliases"
