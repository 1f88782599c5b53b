from __future__ import annotations

import pytest

from mytube.core.exceptions import (
    AccountNotFoundError,
    AuthenticationFailedError,
    InfrastructureError,
    UsernameConflictError,
)


def test_alice_scenario(auth_service, account_store):
    created = auth_service.sign_up("alice", "s3cret!")
    assert created.username == "alice"
    assert created.password_hash != "s3cret!"

    signed_in = auth_service.sign_in("alice", "s3cret!")
    assert signed_in == created

    with pytest.raises(AuthenticationFailedError):
        auth_service.sign_in("alice", "wrong")

    with pytest.raises(UsernameConflictError):
        auth_service.sign_up("alice", "other")

    assert len(account_store) == 1


@pytest.mark.parametrize(
    "username,password",
    [
        ("bob", "hunter22"),
        ("carol.o", "pässwörd-ünïcode"),
        ("d-a_v.e", " leading and trailing "),
        ("eve", "x" * 72),
    ],
)
def test_sign_up_then_sign_in_succeeds(auth_service, username, password):
    auth_service.sign_up(username, password)

    account = auth_service.sign_in(username, password)

    assert account.username == username


@pytest.mark.parametrize("wrong", ["", "hunter2", "hunter222", "HUNTER22", "hunter22 "])
def test_wrong_password_is_authentication_failed(auth_service, wrong):
    auth_service.sign_up("bob", "hunter22")

    with pytest.raises(AuthenticationFailedError):
        auth_service.sign_in("bob", wrong)


def test_unknown_username_is_account_not_found(auth_service):
    with pytest.raises(AccountNotFoundError):
        auth_service.sign_in("nobody", "whatever")


def test_each_account_gets_a_fresh_id(auth_service, identifiers):
    a = auth_service.sign_up("one", "password1")
    b = auth_service.sign_up("two", "password1")

    assert a.id != b.id
    # Same password, different salt
    assert a.password_hash != b.password_hash
    assert identifiers.calls == 2


def test_too_long_password_fails_sign_up_without_saving(auth_service, account_store):
    with pytest.raises(InfrastructureError):
        auth_service.sign_up("frank", "x" * 73)

    assert not account_store.exists_by_username("frank")
