from __future__ import annotations

import sys
from pathlib import Path

# Make the registry package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from registry.domain.accounts import EmailAccount


def test_new_account_has_no_services():
    account = EmailAccount("123456@gmail.com", "password")

    assert account.get_email() == "123456@gmail.com"
    assert account.get_password() == "password"
    assert account.list_services() == []


def test_add_and_remove_services():
    account = EmailAccount("123456@gmail.com", "password")
    account.add_service("keeta")
    account.add_service("gmail")
    account.remove_service("gmail")

    assert account.email == "123456@gmail.com"
    assert account.password == "password"
    assert account.services.get("keeta") is True
    assert account.services.get("gmail") is None


def test_add_service_is_idempotent():
    once = EmailAccount("a@x.com", "p")
    once.add_service("keeta")
    twice = EmailAccount("a@x.com", "p")
    twice.add_service("keeta")
    twice.add_service("keeta")

    assert once.services == twice.services == {"keeta": True}


def test_remove_absent_service_is_noop():
    account = EmailAccount("a@x.com", "p")
    account.add_service("keeta")

    account.remove_service("gmail")

    assert account.services == {"keeta": True}


def test_list_services_returns_all_names():
    account = EmailAccount("a@x.com", "p")
    for name in ("slack", "keeta", "gmail"):
        account.add_service(name)

    assert sorted(account.list_services()) == ["gmail", "keeta", "slack"]


def test_copy_is_independent():
    account = EmailAccount("a@x.com", "p")
    account.add_service("keeta")

    snapshot = account.copy()
    snapshot.add_service("gmail")

    assert snapshot == EmailAccount("a@x.com", "p", {"keeta": True, "gmail": True})
    assert account.services == {"keeta": True}


def test_dict_shape_and_repr_hides_password():
    account = EmailAccount("a@x.com", "s3cret")
    account.add_service("keeta")

    assert account.to_dict() == {"email": "a@x.com", "password": "s3cret", "services": {"keeta": True}}
    assert EmailAccount.from_dict(account.to_dict()) == account
    assert "s3cret" not in repr(account)
