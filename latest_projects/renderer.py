"""Markdown rendering of display records."""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterable, List
from urllib.parse import quote

from .models import LatestProjectEntry

BADGE_URL_TEMPLATE = "https://img.shields.io/badge/language-{lang}-default.svg?style=flat-square"

TABLE_HEADER_TEMPLATE = (
    "\n"
    "| repo | branch | commit | author | time since | language |\n"
    "|:---:|:---:|:---:|:---:|:---:|:---:|\n"
)

TABLE_ROW_TEMPLATE = (
    "| [{repo_name}]({repo_url}) | [{branch_name}]({branch_url}) |[{commit_id}]({commit_url}) "
    "| [@{commit_author_id}]({commit_author_url}) |{time} | ![]({badge})|\n"
)

LIST_ITEM_TEMPLATE = (
    "\n- [{repo_name}]({repo_url}) on branch [{branch_name}]({branch_url}) "
    "with commit [{commit_id}]({commit_url}) by [@{commit_author_id}]({commit_author_url}) "
    "{time} ago  ![]({badge})"
)

ROW_TEMPLATES = {"table": TABLE_ROW_TEMPLATE, "list": LIST_ITEM_TEMPLATE}


def badge_url(lang: str) -> str:
    """Return the shields.io language badge for `lang`."""
    # shields.io treats "-" as a field separator and "_" as a space
    segment = lang.replace("-", "--").replace("_", "__")
    return BADGE_URL_TEMPLATE.format(lang=quote(segment, safe=""))


def render_header(style: str = "table") -> str:
    if style not in ROW_TEMPLATES:
        raise ValueError(f"unknown style {style!r}")
    return TABLE_HEADER_TEMPLATE if style == "table" else ""


def render_entry(entry: LatestProjectEntry, style: str = "table") -> str:
    try:
        template = ROW_TEMPLATES[style]
    except KeyError:
        raise ValueError(f"unknown style {style!r}") from None
    return template.format(badge=badge_url(entry.repo_lang), **asdict(entry))


def render_rows(entries: Iterable[LatestProjectEntry], style: str = "table") -> str:
    """Concatenate one rendered row per entry, in order."""
    parts: List[str] = [render_entry(entry, style) for entry in entries]
    return "".join(parts)


__all__ = [
    "BADGE_URL_TEMPLATE",
    "TABLE_HEADER_TEMPLATE",
    "TABLE_ROW_TEMPLATE",
    "LIST_ITEM_TEMPLATE",
    "badge_url",
    "render_header",
    "render_entry",
    "render_rows",
]
