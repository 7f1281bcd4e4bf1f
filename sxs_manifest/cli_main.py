"""CLI entry point for the SxS manifest generator.

For new code, import directly from sxs_manifest.cli
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
