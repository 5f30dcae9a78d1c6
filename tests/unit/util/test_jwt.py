"""Unit tests for JWT verification."""

from datetime import timedelta

import pytest

from blog.config import AuthSettings
from blog.domain.service import JWTService
from blog.util.jwt import JWTError, extract_bearer_token, verify_token
from tests.harness import make_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-0123456789abcdefghij")


class TestVerifyToken:
    def test_reads_configured_claim(self):
        token = make_token("user-1", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "user-1"
        assert payload.claims["id"] == "user-1"

    def test_falls_back_to_sub(self):
        token = make_token("user-2", SETTINGS, claim="sub")

        assert verify_token(token, SETTINGS).user_id == "user-2"

    def test_expired_token(self):
        token = make_token("user-1", SETTINGS, expires_in=timedelta(seconds=-10))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret(self):
        token = make_token("user-1", AuthSettings(jwt_secret="someone-else-0123456789abcdefghijklmn"))

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(token, SETTINGS)

    def test_token_without_identity(self):
        token = make_token("", SETTINGS)

        with pytest.raises(JWTError, match="no user id"):
            verify_token(token, SETTINGS)


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("Basic abc", None),
            ("Bearer ", None),
            (None, None),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected


class TestJWTService:
    def test_header_wins_over_cookie(self):
        service = JWTService(SETTINGS)

        user_id = service.get_user_id(
            f"Bearer {make_token('from-header', SETTINGS)}",
            make_token("from-cookie", SETTINGS),
        )

        assert user_id == "from-header"

    def test_cookie_used_without_header(self):
        service = JWTService(SETTINGS)

        assert service.get_user_id(None, make_token("u", SETTINGS)) == "u"

    def test_bad_token_is_unauthenticated(self):
        service = JWTService(SETTINGS)

        assert service.get_user_id("Bearer garbage") is None
        assert service.get_user_id(None, None) is None
