# tests/test_storage.py
"""Tests for writing development plans to disk."""

import pytest

from laravel_app_developer.storage import DEFAULT_PLAN_FILE, save_plan, validate_file_name


def test_save_plan_creates_directory(tmp_path):
    output = tmp_path / "nested" / "plans"
    path = save_plan("# Plan\n", output)

    assert path == output / DEFAULT_PLAN_FILE
    assert path.read_text(encoding="utf-8") == "# Plan\n"


def test_save_plan_overwrites(tmp_path):
    save_plan("first", tmp_path, "PLAN.md")
    path = save_plan("second", tmp_path, "PLAN.md")
    assert path.read_text(encoding="utf-8") == "second"


def test_save_plan_writes_utf8(tmp_path):
    path = save_plan("## 🎯 Project Overview\n", tmp_path)
    assert "🎯" in path.read_text(encoding="utf-8")


@pytest.mark.parametrize("name", ["", ".", "..", "../evil.md", "sub/plan.md", "sub\\plan.md", "/etc/passwd"])
def test_rejects_paths(name):
    with pytest.raises(ValueError):
        validate_file_name(name)


def test_rejected_name_writes_nothing(tmp_path):
    with pytest.raises(ValueError):
        save_plan("x", tmp_path / "plans", "../escape.md")
    assert not (tmp_path / "escape.md").exists()
    assert not (tmp_path / "plans").exists()


def test_accepts_plain_names():
    assert validate_file_name("ROADMAP.md") == "ROADMAP.md"
