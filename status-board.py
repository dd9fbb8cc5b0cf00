#!/usr/bin/env python3
"""Thin entrypoint for the status board."""

from __future__ import annotations

from board_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
