"""Domain model for a single email account and its enabled services."""
from __future__ import annotations

from typing import Any, Mapping


class EmailAccount:
    """An email/password pair plus the set of services it is enrolled in.

    ``services`` maps service name -> enabled flag. Enabling always stores
    ``True`` and disabling removes the key, so ``False`` only shows up when it
    was read back from a hand-edited file.
    """

    __slots__ = ("_email", "password", "services")

    def __init__(self, email: str, password: str, services: Mapping[str, bool] | None = None) -> None:
        self._email = email
        self.password = password
        self.services: dict[str, bool] = dict(services or {})

    @property
    def email(self) -> str:
        return self._email

    def get_email(self) -> str:
        return self._email

    def get_password(self) -> str:
        return self.password

    # -------------------------- services --------------------------
    def add_service(self, name: str) -> None:
        self.services[name] = True

    def remove_service(self, name: str) -> None:
        self.services.pop(name, None)

    def has_service(self, name: str) -> bool:
        return name in self.services

    def list_services(self) -> list[str]:
        return list(self.services)

    # -------------------------- snapshots --------------------------
    def copy(self) -> "EmailAccount":
        return EmailAccount(self._email, self.password, self.services)

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self._email,
            "password": self.password,
            "services": dict(self.services),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmailAccount":
        return cls(data["email"], data["password"], data.get("services") or {})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAccount):
            return NotImplemented
        return (self._email, self.password, self.services) == (other._email, other.password, other.services)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        # never include the password
        return f"EmailAccount(email={self._email!r}, services={sorted(self.services)!r})"
