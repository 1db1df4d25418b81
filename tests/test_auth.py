import hashlib

import pytest

from pjlink_client.protocol import derive_auth_token, parse_greeting, PJLINK_ERRA
from pjlink_client import ProtocolError

def test_published_token_vector():
    assert derive_auth_token("498e4a67", "JBMIAProjectorLink") == "5d8409bc1c3fa39749434aa3a5c38682"

def test_token_is_md5_of_seed_and_secret():
    expected = hashlib.md5(b"abcdef12pass").hexdigest()
    assert derive_auth_token("abcdef12", "pass") == expected

def test_token_shape():
    token = derive_auth_token("00000000", "")
    assert len(token) == 32
    assert token == token.lower()
    assert all(c in "0123456789abcdef" for c in token)

def test_token_is_deterministic():
    assert derive_auth_token("1234abcd", "secret") == derive_auth_token("1234abcd", "secret")
    assert derive_auth_token("1234abcd", "secret") != derive_auth_token("1234abce", "secret")

def test_greeting_without_auth():
    assert parse_greeting("PJLINK 0", "ignored") is None

def test_greeting_with_auth_returns_token():
    assert parse_greeting("PJLINK 1 abcdef12", "pass") == derive_auth_token("abcdef12", "pass")

def test_greeting_with_auth_and_empty_password():
    assert parse_greeting("PJLINK 1 abcdef12", "") == derive_auth_token("abcdef12", "")

@pytest.mark.parametrize("greeting", [
    "",
    "HELLO",
    "PJLINK",
    "PJLINK 2 abc",
    PJLINK_ERRA,
    "PJLINK 0garbage",
    "PJLINK 0 ",
    "PJLINK 1",
    "PJLINK 1 ",
    "PJLINK 1abcdef12",
    "PJLINK 1  abcdef12",
    "PJLINK 1 abc def",
  ])
def test_invalid_greeting(greeting):
    with pytest.raises(ProtocolError):
        parse_greeting(greeting, "pass")
