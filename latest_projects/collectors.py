"""Query the viewer's latest repositories and turn them into display records."""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Tuple

import requests

from .errors import QueryError
from .http_client import run_graphql_query
from .models import LatestProjectEntry

UNKNOWN_LANGUAGE = "unknown"

LATEST_REPOS_QUERY = """
query LatestRepos($latestRepoCnt:Int!) {
  viewer {
    login
    repositories(first:$latestRepoCnt, privacy:PUBLIC, orderBy:{field:PUSHED_AT, direction:DESC}) {
      nodes {
        name
        url
        primaryLanguage { name }
        pushedAt
        isFork
        refs(refPrefix:"refs/heads/", orderBy:{field:TAG_COMMIT_DATE, direction:DESC}, first:1) {
          edges {
            node {
              name
              target {
                ... on Commit {
                  history(first:1) {
                    edges {
                      node {
                        commitUrl
                        abbreviatedOid
                        author {
                          name
                          user { login url }
                        }
                      }
                    }
                  }
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


def parse_github_timestamp(raw: Optional[str]) -> Optional[dt.datetime]:
    """Parse GitHub's ISO-8601 timestamps into aware UTC datetimes."""
    if not raw:
        return None
    try:
        parsed = dt.datetime.strptime(raw, "%Y-%m-%dT%H:%M:%SZ")
    except ValueError:
        try:
            parsed = dt.datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed.astimezone(dt.timezone.utc)


def format_duration(delta: dt.timedelta) -> str:
    """Render a duration as "<H> hours <M> minutes", rounded to the nearest minute."""
    micros = max(0, delta // dt.timedelta(microseconds=1))
    minute = 60 * 1_000_000
    minutes = (micros + minute // 2) // minute
    hours, minutes = divmod(minutes, 60)
    return f"{hours} hours {minutes} minutes"


def _first_edge_node(connection: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    edges = (connection or {}).get("edges") or []
    if not edges:
        return None
    return (edges[0] or {}).get("node")


def build_entry(node: Dict[str, Any], now: dt.datetime) -> Optional[LatestProjectEntry]:
    """Flatten one repository node; return None when it has no branch or commit."""
    name = node.get("name") or ""
    repo_url = node.get("url") or ""

    branch = _first_edge_node(node.get("refs"))
    if not branch:
        print(f"[warn] skipping {name}: no branches")
        return None
    commit = _first_edge_node(((branch.get("target") or {}).get("history")))
    if not commit:
        print(f"[warn] skipping {name}: branch {branch.get('name')} has no commits")
        return None

    pushed_at = parse_github_timestamp(node.get("pushedAt"))
    if pushed_at is None:
        print(f"[warn] skipping {name}: missing or invalid pushedAt {node.get('pushedAt')!r}")
        return None

    author = commit.get("author") or {}
    user = author.get("user") or {}
    branch_name = branch.get("name") or ""

    return LatestProjectEntry(
        repo_name=name,
        repo_url=repo_url,
        repo_lang=(node.get("primaryLanguage") or {}).get("name") or UNKNOWN_LANGUAGE,
        branch_name=branch_name,
        branch_url=f"{repo_url}/tree/{branch_name}",
        commit_id=commit.get("abbreviatedOid") or "",
        commit_url=commit.get("commitUrl") or "",
        # commits by emails not linked to an account have a null user
        commit_author_id=user.get("login") or author.get("name") or "unknown",
        commit_author_url=user.get("url") or "",
        time=format_duration(now - pushed_at),
        commit_author_login=user.get("login") or "",
    )


def build_entries(nodes: List[Dict[str, Any]],
                  now: Optional[dt.datetime] = None,
                  skip_forks: bool = False) -> List[LatestProjectEntry]:
    """Map repository nodes to display records, preserving their order."""
    base_time = now or dt.datetime.now(dt.timezone.utc)
    entries: List[LatestProjectEntry] = []
    for node in nodes:
        if not node:
            continue
        if skip_forks and node.get("isFork"):
            print(f"[info] skipping fork {node.get('name')}")
            continue
        entry = build_entry(node, base_time)
        if entry is not None:
            entries.append(entry)
    return entries


def order_by_viewer(entries: List[LatestProjectEntry], viewer_login: str) -> List[LatestProjectEntry]:
    """Stable-sort so records whose latest commit is the viewer's come first."""
    return sorted(entries, key=lambda entry: not viewer_login or entry.commit_author_login != viewer_login)


def fetch_latest_repositories(session: requests.Session, count: int) -> Tuple[str, List[Dict[str, Any]]]:
    """Return the viewer login and up to `count` public repository nodes, newest push first."""
    data = run_graphql_query(session, LATEST_REPOS_QUERY, {"latestRepoCnt": count})
    viewer = data.get("viewer")
    if not isinstance(viewer, dict):
        raise QueryError("GraphQL response has no viewer.")
    nodes = (viewer.get("repositories") or {}).get("nodes")
    if not isinstance(nodes, list):
        raise QueryError("GraphQL response has no repository nodes.")
    return viewer.get("login") or "", nodes


def fetch_latest_projects(session: requests.Session,
                          count: int,
                          sort_by_viewer: bool = True,
                          skip_forks: bool = False,
                          now: Optional[dt.datetime] = None) -> List[LatestProjectEntry]:
    """Query, flatten and optionally reorder the viewer's latest repositories."""
    login, nodes = fetch_latest_repositories(session, count)
    print(f"[info] viewer {login} has {len(nodes)} recently pushed public repositories")
    entries = build_entries(nodes, now=now, skip_forks=skip_forks)
    if sort_by_viewer:
        entries = order_by_viewer(entries, login)
    return entries


__all__ = [
    "UNKNOWN_LANGUAGE",
    "LATEST_REPOS_QUERY",
    "parse_github_timestamp",
    "format_duration",
    "build_entry",
    "build_entries",
    "order_by_viewer",
    "fetch_latest_repositories",
    "fetch_latest_projects",
]
