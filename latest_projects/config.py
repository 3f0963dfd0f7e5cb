"""Central configuration for the latest-projects README feed."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    print(f"[warn] unrecognised value {raw!r} for {name}; using {default}")
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        print(f"[warn] {name} must be an integer, got {raw!r}; using {default}")
        return default


GITHUB_TOKEN = os.getenv("GITHUB_TOKEN", "")
USER_AGENT = "latest-projects-readme/1.0"
GRAPHQL_URL = "https://api.github.com/graphql"
REQUEST_TIMEOUT = _env_int("REQUEST_TIMEOUT", 30)
LATEST_REPO_COUNT = _env_int("LATEST_REPO_COUNT", 5)
ENABLE_SORT_BY_VIEWER = _env_flag("ENABLE_SORT_BY_VIEWER", True)
SKIP_FORKS = _env_flag("SKIP_FORKS", False)
STAGING_README_FILE = "./README-1.md"
OUTPUT_README_FILE = "README.md"
MAX_REPO_COUNT = 100  # GraphQL connection `first` limit
STYLES = ("table", "list")


@dataclass(frozen=True)
class FeedSettings:
    """Resolved runtime settings for one feed run."""

    token: str
    count: int
    sort_by_viewer: bool
    skip_forks: bool
    staging_file: Path
    output_file: Path
    style: str
    dry_run: bool


def _repo_count(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}")
    if not 1 <= value <= MAX_REPO_COUNT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_REPO_COUNT}, got {value}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the feed entry point."""

    parser = argparse.ArgumentParser(
        description="Append a table of your latest pushed GitHub repositories to a README.",
    )
    parser.add_argument("--count", type=_repo_count, default=str(LATEST_REPO_COUNT))
    parser.add_argument("--staging", default=STAGING_README_FILE)
    parser.add_argument("--output", default=OUTPUT_README_FILE)
    parser.add_argument(
        "--no-viewer-first",
        dest="sort_by_viewer",
        action="store_false",
        default=ENABLE_SORT_BY_VIEWER,
        help="Keep push order instead of floating your own commits to the top.",
    )
    parser.add_argument("--skip-forks", action="store_true", default=SKIP_FORKS)
    parser.add_argument("--style", choices=STYLES, default="table")
    parser.add_argument("--dry-run", action="store_true", help="Print the Markdown instead of writing files.")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> FeedSettings:
    args = args or parse_args([])
    return FeedSettings(
        token=GITHUB_TOKEN,
        count=int(args.count),
        sort_by_viewer=bool(args.sort_by_viewer),
        skip_forks=bool(args.skip_forks),
        staging_file=Path(args.staging),
        output_file=Path(args.output),
        style=args.style,
        dry_run=bool(args.dry_run),
    )


__all__ = [
    "GITHUB_TOKEN",
    "USER_AGENT",
    "GRAPHQL_URL",
    "REQUEST_TIMEOUT",
    "LATEST_REPO_COUNT",
    "ENABLE_SORT_BY_VIEWER",
    "SKIP_FORKS",
    "STAGING_README_FILE",
    "OUTPUT_README_FILE",
    "MAX_REPO_COUNT",
    "STYLES",
    "FeedSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
