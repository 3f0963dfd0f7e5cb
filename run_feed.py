"""Convenience shim to run the latest-projects README feed."""

from __future__ import annotations

import sys

from latest_projects.runner import main


if __name__ == "__main__":
    main(sys.argv[1:])
