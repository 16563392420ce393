#!/usr/bin/env python3
"""
Manage the email account registry file from the shell.

Usage:
  python scripts/manage_accounts.py [--file accounts.json] add EMAIL PASSWORD
  python scripts/manage_accounts.py remove EMAIL
  python scripts/manage_accounts.py enable EMAIL SERVICE
  python scripts/manage_accounts.py disable EMAIL SERVICE
  python scripts/manage_accounts.py list
  python scripts/manage_accounts.py missing SERVICE

The data file defaults to EMAIL_REGISTRY_DATA_FILE (or ./accounts.json).
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the registry package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from registry.core.config import get_settings  # noqa: E402
from registry.core.logging_config import setup_logging  # noqa: E402
from registry.domain.accounts import EmailAccount  # noqa: E402
from registry.services.email_manager import EmailManager  # noqa: E402


def format_account(account: EmailAccount) -> str:
    return f"{account.email}: {', '.join(sorted(account.list_services()))}".rstrip()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage email accounts and their services")
    ap.add_argument("--file", type=Path, help="Registry JSON file (default: EMAIL_REGISTRY_DATA_FILE)")
    sub = ap.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add or replace an account")
    add.add_argument("email")
    add.add_argument("password")

    remove = sub.add_parser("remove", help="Remove an account")
    remove.add_argument("email")

    enable = sub.add_parser("enable", help="Enable a service for an account")
    enable.add_argument("email")
    enable.add_argument("service")

    disable = sub.add_parser("disable", help="Disable a service for an account")
    disable.add_argument("email")
    disable.add_argument("service")

    sub.add_parser("list", help="List all accounts and their services")

    missing = sub.add_parser("missing", help="List accounts without a service")
    missing.add_argument("service")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)
    path: Path = args.file or settings.data_file

    manager = EmailManager.load(path)

    if args.command == "list":
        for account in sorted(manager.list_accounts(), key=lambda a: a.email):
            print(format_account(account))
        return
    if args.command == "missing":
        for account in sorted(manager.accounts_missing_service(args.service), key=lambda a: a.email):
            print(account.email)
        return

    if args.command == "add":
        manager.add_account(args.email, args.password)
    elif args.command == "remove":
        manager.remove_account(args.email)
    else:
        account = manager.get_account(args.email)
        if account is None:
            raise SystemExit(f"Account '{args.email}' not found")
        if args.command == "enable":
            account.add_service(args.service)
        else:
            account.remove_service(args.service)

    manager.save(path)
    print("OK")


def run(argv: list[str] | None = None) -> int:
    """Run main() and turn load/save failures into exit status 1."""
    try:
        main(argv)
    except Exception as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
