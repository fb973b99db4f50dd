"""
Entry point for running repo-intake as a module.

Usage:
    python -m cli check PATH
    python -m cli add PATH [--trust] [--yes]
    python -m cli list
"""

import asyncio
from .commands import main

if __name__ == "__main__":
    asyncio.run(main())
