"""Tests for latest_projects.renderer checking the exact Markdown output.

Run with coverage:
    pytest tests/test_renderer.py --maxfail=1 -v --cov=latest_projects.renderer --cov-report=term-missing
"""

import pytest

from latest_projects import renderer
from latest_projects.models import LatestProjectEntry


def _entry(**overrides):
    fields = dict(
        repo_name="foo",
        repo_url="https://github.com/alice/foo",
        repo_lang="Go",
        branch_name="main",
        branch_url="https://github.com/alice/foo/tree/main",
        commit_id="abc123",
        commit_url="https://github.com/alice/foo/commit/abc123",
        commit_author_id="alice",
        commit_author_url="https://github.com/alice",
        time="3 hours 15 minutes",
    )
    fields.update(overrides)
    return LatestProjectEntry(**fields)


def test_render_entry_table_row_literal():
    expected = (
        "| [foo](https://github.com/alice/foo) | [main](https://github.com/alice/foo/tree/main) "
        "|[abc123](https://github.com/alice/foo/commit/abc123) | [@alice](https://github.com/alice) "
        "|3 hours 15 minutes | ![](https://img.shields.io/badge/language-Go-default.svg?style=flat-square)|\n"
    )
    assert renderer.render_entry(_entry()) == expected


def test_render_entry_list_item():
    item = renderer.render_entry(_entry(), style="list")
    assert item.startswith("\n- [foo](https://github.com/alice/foo) on branch [main]")
    assert "by [@alice](https://github.com/alice) 3 hours 15 minutes ago  ![](" in item


def test_render_header_and_rows():
    assert renderer.render_header() == (
        "\n| repo | branch | commit | author | time since | language |\n"
        "|:---:|:---:|:---:|:---:|:---:|:---:|\n"
    )
    assert renderer.render_header("list") == ""
    rows = renderer.render_rows([_entry(repo_name="a"), _entry(repo_name="b")])
    assert rows.count("\n") == 2
    assert rows.index("[a]") < rows.index("[b]")
    assert renderer.render_rows([]) == ""


def test_badge_url_escapes_shields_separators():
    assert renderer.badge_url("Go").endswith("language-Go-default.svg?style=flat-square")
    assert "language-C%2B%2B-default" in renderer.badge_url("C++")
    assert "language-Jupyter%20Notebook-default" in renderer.badge_url("Jupyter Notebook")
    assert "language-Objective--C-default" in renderer.badge_url("Objective-C")


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        renderer.render_entry(_entry(), style="html")
    with pytest.raises(ValueError):
        renderer.render_header("html")
