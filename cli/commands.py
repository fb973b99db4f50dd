"""
CLI subcommand implementations for the repo-intake system.

Subcommands::

    repo-intake check PATH
    repo-intake add   PATH [--trust] [--yes]
    repo-intake list
"""

import argparse
import sys

from core.domain import Bare, Missing, Unsafe, Valid, ValidationSnapshot
from intake_platform.facade import AddRepositoryFacade
from intake_platform.user_config import get_repositories


def _make_facade(path: str = "") -> AddRepositoryFacade:
    return AddRepositoryFacade.from_environment(path)


def _describe(snapshot: ValidationSnapshot) -> str:
    """Human-readable explanation of a settled snapshot."""
    classification = snapshot.classification
    if isinstance(classification, Valid):
        return f"{snapshot.path} is a Git repository."
    if isinstance(classification, Bare):
        return (
            f"{snapshot.path} appears to be a bare repository. "
            "Bare repositories are not currently supported."
        )
    if isinstance(classification, Unsafe):
        location = ""
        if snapshot.owner_path_differs:
            location = f" at {classification.owner_path}"
        return (
            f"The Git repository{location} appears to be owned by another user on this machine. "
            "Adding untrusted repositories may automatically execute files in the repository."
        )
    if isinstance(classification, Missing):
        return f"{snapshot.path} does not appear to be a Git repository."
    return f"{snapshot.path} has not been validated."


async def _validate(facade: AddRepositoryFacade, path: str) -> ValidationSnapshot:
    task = facade.set_path(path)
    if task is not None:
        await task
    return facade.get_snapshot()


def _confirm_trust(snapshot: ValidationSnapshot, *, assume_yes: bool) -> bool:
    if assume_yes:
        return True

    interactive = sys.stdin.isatty() and sys.stdout.isatty()
    if not interactive:
        print("  Re-run with --trust to add an exception for this directory.")
        return False

    try:
        answer = input(
            f"  Trust {snapshot.unsafe_owner_path} and add an exception for it? (y/N): "
        )
    except (EOFError, KeyboardInterrupt):
        return False
    return answer.strip().lower() in ("y", "yes")


# ---------------------------------------------------------------------------
# Subcommand: check
# ---------------------------------------------------------------------------

async def cmd_check(args):
    facade = _make_facade()
    snapshot = await _validate(facade, args.path)
    facade.dismiss()

    kind = getattr(snapshot.classification, "kind", "unknown")
    print(f"{kind}: {_describe(snapshot)}")
    if not isinstance(snapshot.classification, Valid):
        sys.exit(1)


# ---------------------------------------------------------------------------
# Subcommand: add
# ---------------------------------------------------------------------------

async def cmd_add(args):
    facade = _make_facade()
    snapshot = await _validate(facade, args.path)

    if isinstance(snapshot.classification, Unsafe):
        owner_path = snapshot.unsafe_owner_path
        print(f"Warning: {_describe(snapshot)}")
        if args.trust or _confirm_trust(snapshot, assume_yes=args.yes):
            trusted = await facade.request_trust()
            if not trusted:
                print(f"Error: Could not trust {owner_path}.")
                facade.dismiss()
                sys.exit(1)
            if facade.trust_resolver.revalidation is not None:
                await facade.trust_resolver.revalidation
            snapshot = facade.get_snapshot()
            print(f"✓ Trusted {owner_path}")

    if not facade.can_submit():
        print(f"Error: {_describe(snapshot)}")
        target = facade.create_repository_target()
        if target:
            print(f"  To create a repository there instead, run: git init {target}")
        facade.dismiss()
        sys.exit(1)

    try:
        handle = await facade.submit()
    except OSError as e:
        facade.dismiss()
        print(f"Error: Could not save the repository list: {e}")
        sys.exit(1)
    if handle is None:
        print("Error: The repository was not added.")
        sys.exit(1)
    print(f"✓ Added repository {handle.path}")


# ---------------------------------------------------------------------------
# Subcommand: list
# ---------------------------------------------------------------------------

def cmd_list(args):
    repositories = get_repositories()
    if not repositories:
        print("No repositories added yet.")
        return
    print(f"Repositories ({len(repositories)}):")
    for handle in repositories:
        print(f"  • {handle.path}")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="repo-intake",
        description="Validate, trust and add existing local Git repositories",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- check ---
    p_check = subparsers.add_parser("check", help="Classify a path without adding it")
    p_check.add_argument("path", help="Path to the repository (~ is expanded)")

    # --- add ---
    p_add = subparsers.add_parser("add", help="Add an existing local repository")
    p_add.add_argument("path", help="Path to the repository (~ is expanded)")
    p_add.add_argument(
        "--trust", action="store_true",
        help="Add a safe.directory exception if the repository is owned by another user",
    )
    p_add.add_argument(
        "--yes", "-y", action="store_true",
        help="Answer yes to the trust prompt",
    )

    # --- list ---
    subparsers.add_parser("list", help="List added repositories")

    return parser


async def main():
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == 'check':
        await cmd_check(args)
    elif args.command == 'add':
        await cmd_add(args)
    elif args.command == 'list':
        cmd_list(args)
