"""Display record shared by the collectors and the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LatestProjectEntry:
    """One rendered row: repository, its newest branch and that branch's head commit."""

    # repo info
    repo_name: str
    repo_url: str
    repo_lang: str

    # commit info
    branch_name: str
    branch_url: str
    commit_id: str
    commit_url: str
    commit_author_id: str
    commit_author_url: str

    # elapsed since last push, e.g. "3 hours 15 minutes"
    time: str

    # GitHub account the commit is attributed to; empty when the author is not linked
    commit_author_login: str = ""


__all__ = ["LatestProjectEntry"]
