# SPDX-License-Identifier: AGPL-3.0-or-later

from pathlib import Path
import pytest

from license_headers.config import Settings, load_settings, load_yaml
from license_headers.errors import ConfigError


def test_defaults():
    s = Settings()
    assert s.extensions == {"rs"}
    assert s.skip_dirs == {"target"}
    assert s.header().text.startswith("// Copyright ")


def test_extensions_are_normalized():
    s = Settings(extensions=[".rs", "toml", " "], skip_dirs="target, .git")
    assert s.extensions == {"rs", "toml"}
    assert s.skip_dirs == {"target", ".git"}


def test_yaml_in_root_is_picked_up(tmp_path: Path):
    (tmp_path / ".license-headers.yaml").write_text(
        "extensions: [py]\nskip-dirs: [venv]\ncomment: '#'\nholder: ACME\nyear: 2020\n",
        encoding="utf-8",
    )
    s = load_settings(tmp_path)
    assert s.extensions == {"py"}
    assert s.skip_dirs == {"venv"}
    assert s.header().text.startswith("# Copyright 2020 ACME\n")


def test_cli_overrides_win_and_none_is_ignored(tmp_path: Path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("year: 2020\nholder: ACME\n", encoding="utf-8")
    s = load_settings(tmp_path, cfg, {"year": 2031, "holder": None})
    assert s.year == 2031
    assert s.holder == "ACME"


def test_missing_file_gives_empty_config(tmp_path: Path, capsys):
    assert load_yaml(tmp_path / "nope.yaml") == {}
    assert "[i] config" in capsys.readouterr().out


def test_non_mapping_yaml_is_ignored(tmp_path: Path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("- rs\n- toml\n", encoding="utf-8")
    assert load_yaml(cfg) == {}


@pytest.mark.parametrize("text", [
    "colour: red\n", "encoding: no-such-codec\n", "year: soon\n", "extensions:\n", "skip_dirs: 5\n",
])
def test_invalid_settings_raise_config_error(tmp_path: Path, text):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(tmp_path, cfg)


def test_broken_yaml_raises_config_error(tmp_path: Path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("extensions: [rs\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(tmp_path, cfg)
