"""Exceptions raised by the registry storage and services."""

from __future__ import annotations

from pathlib import Path


class RegistryError(Exception):
    """Base class for registry-related exceptions."""


class AccountsDecodeError(RegistryError):
    """The accounts file exists but is not valid JSON or has the wrong shape."""

    def __init__(self, path: Path | str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message


class AccountsEncodeError(RegistryError):
    """The registry holds text that cannot be written as UTF-8 JSON.

    Raised before the target file is opened, so an existing file is left as it was.
    """

    def __init__(self, path: Path | str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message
