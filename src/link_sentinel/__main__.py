"""CLI entrypoint for link_sentinel."""

from __future__ import annotations

from link_sentinel.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
