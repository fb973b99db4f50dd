#!/usr/bin/env python3
"""
repo-intake: JSON API server

Starts a local web server exposing the add-repository workflow over HTTP.
This is an alternative to the CLI (repo-intake.py). Both interfaces share
the same validation core and user config.

Usage:
    python repo-intake-web.py [--port 8000] [--host 127.0.0.1]
"""

from web.__main__ import main

if __name__ == "__main__":
    main()
