#!/usr/bin/env python3
"""Local CLI entrypoint to run the scanner from a source checkout.

Usage:
  python scripts/scan.py --list compromised.txt [--npm-json tree.json] [--format json]

This calls the same entrypoint as the installed ``npm-compromised-scan`` script.
"""

from __future__ import annotations

from npm_compromised_scan.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
