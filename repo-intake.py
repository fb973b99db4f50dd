#!/usr/bin/env python3
"""
repo-intake: add existing local Git repositories.

Usage:
    python repo-intake.py check PATH
    python repo-intake.py add PATH [--trust] [--yes]
    python repo-intake.py list

This file is a thin wrapper around the cli package.
"""

import asyncio
from cli.commands import main

if __name__ == "__main__":
    asyncio.run(main())
