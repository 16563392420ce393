"""
JSON-file persistence for the account registry.

The whole registry lives in one UTF-8 JSON document:

    {"accounts": {"<email>": {"email": ..., "password": ..., "services": {...}}}}

Reads validate the shape with pydantic before anything reaches the services;
writes always replace the full file.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from registry.core.errors import AccountsDecodeError, AccountsEncodeError

logger = logging.getLogger(__name__)


class AccountRecord(BaseModel):
    """One account object as stored on disk."""

    model_config = ConfigDict(extra="forbid", strict=True)

    email: str
    password: str
    services: dict[str, bool]


class AccountsSnapshot(BaseModel):
    """Top-level document: accounts keyed by email."""

    model_config = ConfigDict(extra="forbid", strict=True)

    accounts: dict[str, AccountRecord]

    @model_validator(mode="after")
    def _keys_match_emails(self) -> "AccountsSnapshot":
        for key, record in self.accounts.items():
            if key != record.email:
                raise ValueError(f"account key {key!r} does not match email {record.email!r}")
        return self


def empty_snapshot() -> dict:
    return {"accounts": {}}


def _describe_errors(exc: ValidationError) -> str:
    # field locations and messages only; input values may hold passwords
    parts = []
    for err in exc.errors(include_url=False, include_input=False):
        loc = ".".join(str(p) for p in err["loc"]) or "<document>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def read_snapshot(path: Path | str) -> dict | None:
    """Return the validated document stored at ``path``, or None when there is no file."""
    path = Path(path)
    if not path.exists():
        logger.info("No accounts file at %s, starting empty", path)
        return None
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise AccountsDecodeError(path, f"not UTF-8 text (byte {exc.start})") from exc
    try:
        snapshot = AccountsSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise AccountsDecodeError(
            path, f"invalid accounts file ({exc.error_count()} errors): {_describe_errors(exc)}"
        ) from exc
    logger.info("Loaded %d accounts from %s", len(snapshot.accounts), path)
    return snapshot.model_dump()


def write_snapshot(path: Path | str, data: dict) -> None:
    """Serialize ``data`` and overwrite ``path`` (no temp file, no rename).

    The document is encoded before the file is opened; an AccountsEncodeError
    leaves any existing file untouched.
    """
    path = Path(path)
    try:
        payload = json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise AccountsEncodeError(path, f"text cannot be encoded as UTF-8 (character {exc.start})") from exc
    path.write_bytes(payload)
    logger.info("Saved %d accounts to %s", len(data.get("accounts", {})), path)
