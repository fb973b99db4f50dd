"""
Serve the repo-intake JSON API.

Usage:
    python -m web [--port 8000] [--host 127.0.0.1] [--reload]
"""

import argparse
import uvicorn


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="repo-intake: JSON API for validating and adding local Git repositories"
    )
    parser.add_argument(
        "--port", type=int, default=8000,
        help="API port (default: 8000)"
    )
    parser.add_argument(
        "--host", type=str, default="127.0.0.1",
        help="Interface to bind; keep it local, trusting edits your global git config"
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Restart the server when source files change"
    )
    return parser


def main():
    args = build_parser().parse_args()
    base = f"http://{args.host}:{args.port}"

    print("\n  repo-intake API")
    print(f"  Add-repository dialog: {base}/api/add-repository")
    print(f"  Registered repositories: {base}/api/repositories\n")

    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
