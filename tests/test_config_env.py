from pathlib import Path

import pytest

from oneword.config import load_config


def test_env_library_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "books.json"
    monkeypatch.setenv("ONEWORD_LIBRARY", str(target))
    cfg = load_config()
    assert cfg.library.path == str(target)
    assert cfg.library.resolved_path == target


def test_custom_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('library:\n  path_env: "CUSTOM_LIBRARY"\n')
    monkeypatch.setenv("CUSTOM_LIBRARY", "/tmp/custom.json")
    cfg = load_config(cfg_file)
    assert cfg.library.path_env == "CUSTOM_LIBRARY"
    assert cfg.library.path == "/tmp/custom.json"


def test_yaml_path_loses_to_env(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('library:\n  path: "/from/yaml.json"\n')
    cfg = load_config(cfg_file, env={"ONEWORD_LIBRARY": "/from/env.json"})
    assert cfg.library.path == "/from/env.json"
    cfg = load_config(cfg_file, env={})
    assert cfg.library.path == "/from/yaml.json"


def test_empty_env_value_ignored() -> None:
    cfg = load_config(env={"ONEWORD_LIBRARY": ""})
    assert cfg.library.path == "~/.oneword/library.json"
