"""Tests for loading config.yaml."""

from __future__ import annotations

from pathlib import Path

import pytest

from lectern.config import (
    ConfigFileError,
    ConfigLoader,
    ConfigNotFoundError,
    ConfigValidationError,
    SiteConfig,
    load_site_config,
)


def test_load_from_file(tmp_path: Path):
    (tmp_path / "config.yaml").write_text(
        """
target: out
source: src
templates: tpl
blog: src/posts
ignore:
  - drafts.md
shorthands:
  "--": "&#151;"
  "\\\\.\\\\.\\\\.": "&hellip;"
globals:
  sitename: My Site
""",
        encoding="utf-8",
    )

    config = ConfigLoader(tmp_path).load()

    assert isinstance(config, SiteConfig)
    assert config.site_root == tmp_path.resolve()
    assert config.target_dir == tmp_path.resolve() / "out"
    assert config.source_dir == tmp_path.resolve() / "src"
    assert config.templates_dir == tmp_path.resolve() / "tpl"
    assert config.blog_dir == tmp_path.resolve() / "src" / "posts"
    assert config.ignore == ["drafts.md"]
    assert list(config.shorthands) == ["--", r"\.\.\."]
    assert len(config.shorthand_table) == 2
    assert config.globals == {"sitename": "My Site"}
    assert config.clean is False


def test_explicit_path_resolves_relative_to_file(tmp_path: Path, monkeypatch):
    site_dir = tmp_path / "site"
    site_dir.mkdir()
    config_path = site_dir / "lectern.yaml"
    config_path.write_text("target: build\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    config = load_site_config(config_path)

    assert config.target_dir == site_dir.resolve() / "build"
    assert config.source_dir == site_dir.resolve() / "content"


def test_absolute_paths_are_kept(tmp_path: Path):
    absolute = tmp_path / "elsewhere"
    (tmp_path / "config.yaml").write_text(f"target: {absolute}\n", encoding="utf-8")

    assert ConfigLoader(tmp_path).load().target_dir == absolute


def test_environment_overrides_file(tmp_path: Path, monkeypatch):
    (tmp_path / "config.yaml").write_text("target: from-file\nclean: false\n", encoding="utf-8")
    monkeypatch.setenv("LECTERN_TARGET", "from-env")
    monkeypatch.setenv("LECTERN_CLEAN", "true")

    config = ConfigLoader(tmp_path).load()

    assert config.target == Path("from-env")
    assert config.clean is True


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigNotFoundError):
        ConfigLoader(tmp_path).load()


def test_invalid_yaml_raises(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("target: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigFileError):
        ConfigLoader(tmp_path).load()


def test_non_mapping_root_raises(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigFileError, match="mapping"):
        ConfigLoader(tmp_path).load()


def test_invalid_shorthand_pattern_raises(tmp_path: Path):
    (tmp_path / "config.yaml").write_text('shorthands:\n  "(": "x"\n', encoding="utf-8")

    with pytest.raises(ConfigValidationError) as excinfo:
        ConfigLoader(tmp_path).load()

    assert excinfo.value.errors
    assert "shorthands" in str(excinfo.value)


def test_wrong_type_raises(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("ignore: 3\n", encoding="utf-8")

    with pytest.raises(ConfigValidationError):
        ConfigLoader(tmp_path).load()
