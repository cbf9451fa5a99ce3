"""Tests for core/crypto.py."""
from __future__ import annotations

import pytest

from meditation_server.core.crypto import (
    MAX_PASSWORD_BYTES,
    PasswordTooLongError,
    hash_password,
    password_fits,
    verify_password,
)


def test_hash_and_verify():
    hashed = hash_password("breathe-slowly")
    assert hashed != "breathe-slowly"
    assert verify_password("breathe-slowly", hashed)
    assert not verify_password("breathe-quickly", hashed)


def test_limit_counts_bytes_not_characters():
    assert password_fits("a" * MAX_PASSWORD_BYTES)
    assert not password_fits("a" * (MAX_PASSWORD_BYTES + 1))
    assert not password_fits("é" * 40)


def test_hash_rejects_overlong_password():
    with pytest.raises(PasswordTooLongError):
        hash_password("é" * 40)


def test_verify_overlong_password_is_false():
    hashed = hash_password("a" * MAX_PASSWORD_BYTES)
    assert not verify_password("a" * MAX_PASSWORD_BYTES + "b", hashed)


def test_verify_against_malformed_hash_is_false():
    assert not verify_password("breathe-slowly", "not-a-bcrypt-hash")
