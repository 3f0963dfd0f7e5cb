"""Entry point wiring settings, the GraphQL client, rendering and the README writer."""

from __future__ import annotations

import sys
from typing import List, Optional

from .collectors import fetch_latest_projects
from .config import FeedSettings, parse_args, resolve_settings
from .errors import FeedError
from .http_client import build_session
from .renderer import render_header, render_rows
from .writer import append_and_rename


def run(settings: FeedSettings) -> str:
    """Execute one feed run and return the Markdown that was produced."""
    session = build_session(settings.token)

    print(f"fetching latest {settings.count} repositories...")
    entries = fetch_latest_projects(
        session,
        settings.count,
        sort_by_viewer=settings.sort_by_viewer,
        skip_forks=settings.skip_forks,
    )

    print(f"  rendering {len(entries)} entries as {settings.style}...")
    header = render_header(settings.style)
    body = render_rows(entries, settings.style)

    if settings.dry_run:
        print(header + body)
        return header + body

    published = append_and_rename(settings.staging_file, settings.output_file, header, body)
    print(f"    DONE -> {published}")
    return header + body


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; any feed failure exits with status 1."""
    args = parse_args(argv)
    settings = resolve_settings(args)
    try:
        run(settings)
    except FeedError as exc:
        print(f"[error] {exc}")
        sys.exit(1)


__all__ = ["run", "main"]
