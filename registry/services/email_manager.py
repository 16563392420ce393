"""
Account registry use cases: CRUD over EmailAccount plus whole-file load/save.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, TypeVar
import logging

from registry.domain.accounts import EmailAccount
from registry.repositories.json_storage import empty_snapshot, read_snapshot, write_snapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmailManager:
    """Owns every EmailAccount, keyed by its email address.

    Not thread-safe: callers that share a manager between threads must wrap
    every call in their own lock.
    """

    def __init__(self) -> None:
        self.accounts: dict[str, EmailAccount] = {}

    # -------------------------- persistence --------------------------
    @classmethod
    def load(cls, path: Path | str) -> "EmailManager":
        """Rebuild a manager from ``path``; a missing file gives an empty manager.

        Raises AccountsDecodeError for malformed content and OSError when the
        file cannot be read.
        """
        manager = cls()
        data = read_snapshot(path)
        if data is None:
            return manager
        for email, record in data["accounts"].items():
            manager.accounts[email] = EmailAccount.from_dict(record)
        return manager

    def save(self, path: Path | str) -> None:
        """Overwrite ``path`` with the full current state."""
        data = empty_snapshot()
        for email, account in self.accounts.items():
            data["accounts"][email] = account.to_dict()
        write_snapshot(path, data)

    # -------------------------- accounts --------------------------
    def add_account(self, email: str, password: str) -> None:
        if email in self.accounts:
            logger.debug("Replacing existing account %s", email)
        self.accounts[email] = EmailAccount(email, password)

    def remove_account(self, email: str) -> None:
        if self.accounts.pop(email, None) is not None:
            logger.debug("Removed account %s", email)

    def get_account(self, email: str) -> Optional[EmailAccount]:
        """Return the live account for in-place edits, or None.

        Use the result right away and fetch it again after removing or
        replacing accounts; prefer ``update_account`` when possible.
        """
        return self.accounts.get(email)

    def update_account(self, email: str, func: Callable[[EmailAccount], T]) -> Optional[T]:
        """Apply ``func`` to the live account and return its result (None if unknown)."""
        account = self.accounts.get(email)
        if account is None:
            return None
        return func(account)

    def list_accounts(self) -> list[EmailAccount]:
        return [account.copy() for account in self.accounts.values()]

    def accounts_missing_service(self, service: str) -> list[EmailAccount]:
        """Snapshots of every account whose service map has no ``service`` key."""
        return [account.copy() for account in self.accounts.values() if not account.has_service(service)]

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, email: object) -> bool:
        return email in self.accounts
