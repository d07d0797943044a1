# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from robots_builder.config import OutputOptions, load_options, resolve_options


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"options{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc,force",
    [
        ("force: true", ".yaml", None, True),
        ("force: false", ".yml", None, False),
        ("", ".yaml", None, False),
        (json.dumps({"force": True}), ".json", None, True),
        ("force: true\nunknown: 1", ".yaml", ValidationError, None),
        ("force: [1, 2]", ".yaml", ValidationError, None),
        ("- force", ".yaml", TypeError, None),
        ("force: [unclosed", ".yaml", ValueError, None),
        ("{broken", ".json", ValueError, None),
        ("force = true", ".toml", ValueError, None),
    ],
)
def test_load_options_variants(tmp_path, content, suffix, expect_exc, force):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_options(cfg_path)
    else:
        opts = load_options(cfg_path)
        assert isinstance(opts, OutputOptions)
        assert opts.force is force


def test_load_options_default():
    assert load_options(None) == OutputOptions(force=False)


def test_load_options_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.yaml")


def test_options_are_frozen():
    opts = OutputOptions()
    with pytest.raises(ValidationError):
        opts.force = True


def test_resolve_options():
    assert resolve_options(None).force is False
    assert resolve_options({"force": True}).force is True
    assert resolve_options(OutputOptions(force=True), force=None).force is True
    assert resolve_options(None, force=True).force is True
    with pytest.raises(TypeError):
        resolve_options("force")


def test_load_options_empty_json_gives_defaults(tmp_path):
    assert load_options(write_file(tmp_path, "", ".json")) == OutputOptions()


@pytest.mark.parametrize(
    "content,suffix,message",
    [
        ("force: [unclosed", ".yaml", "не является корректным YAML"),
        ("{broken", ".json", "не является корректным JSON"),
        ("force = true", ".toml", "только из YAML или JSON"),
    ],
)
def test_load_options_error_messages(tmp_path, content, suffix, message):
    with pytest.raises(ValueError, match=message):
        load_options(write_file(tmp_path, content, suffix))
