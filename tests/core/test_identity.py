import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock
from app.core.identity import SupabaseIdentityProvider, extract_bearer_token


@pytest.mark.parametrize("header, expected", [
    ("Bearer abc.def", "abc.def"),
    ("bearer   abc.def  ", "abc.def"),
    ("Basic abc", None),
    ("Bearer ", None),
    ("", None),
    (None, None),
])
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_resolves_user_from_token():
    client = MagicMock()
    client.auth.get_user.return_value = SimpleNamespace(
        user=SimpleNamespace(id="u-1", email="cook@example.com")
    )

    user = SupabaseIdentityProvider(client=client).get_current_user("token")

    client.auth.get_user.assert_called_once_with("token")
    assert user.id == "u-1"
    assert user.email == "cook@example.com"


def test_blank_token_is_anonymous_without_calling_auth():
    client = MagicMock()

    assert SupabaseIdentityProvider(client=client).get_current_user("   ") is None
    client.auth.get_user.assert_not_called()


def test_auth_failure_is_anonymous():
    """만료/위조 토큰 등으로 Auth 호출이 실패하면 예외 대신 비로그인으로 처리"""
    client = MagicMock()
    client.auth.get_user.side_effect = Exception("invalid JWT")

    assert SupabaseIdentityProvider(client=client).get_current_user("expired") is None


def test_missing_user_is_anonymous():
    client = MagicMock()
    client.auth.get_user.return_value = SimpleNamespace(user=None)

    assert SupabaseIdentityProvider(client=client).get_current_user("token") is None
