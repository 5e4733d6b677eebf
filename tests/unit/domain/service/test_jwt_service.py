"""Unit tests for JWTService and access token verification."""

from datetime import timedelta
from uuid import uuid4

import pytest

from devfeed.config import AuthSettings
from devfeed.domain.service import JWTService
from devfeed.util.jwt import JWTError, verify_token
from tests.conftest import make_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough")


class TestVerifyToken:
    """Tests for verify_token function."""

    def test_valid_token(self):
        user_id = uuid4()
        token = make_token(user_id, SETTINGS, email="dev@example.com")

        payload = verify_token(token, SETTINGS)

        assert payload.sub == str(user_id)
        assert payload.email == "dev@example.com"

    def test_expired_token(self):
        token = make_token(uuid4(), SETTINGS, expires_in=timedelta(minutes=-5))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_audience(self):
        token = make_token(uuid4(), SETTINGS, aud="anon")

        with pytest.raises(JWTError, match="audience"):
            verify_token(token, SETTINGS)

    def test_wrong_secret(self):
        other = AuthSettings(jwt_secret="another-projects-secret-long-enough")
        token = make_token(uuid4(), other)

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)

    def test_garbage(self):
        with pytest.raises(JWTError):
            verify_token("not-a-jwt", SETTINGS)


class TestGetUserIdFromToken:
    """Tests for JWTService.get_user_id_from_token."""

    def test_valid_token_yields_user_id(self):
        user_id = uuid4()
        service = JWTService(SETTINGS)

        assert service.get_user_id_from_token(make_token(user_id, SETTINGS)) == user_id

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_invalid_token_is_anonymous(self, token):
        service = JWTService(SETTINGS)

        assert service.get_user_id_from_token(token) is None

    def test_non_uuid_subject_is_anonymous(self):
        service = JWTService(SETTINGS)
        token = make_token("service-role", SETTINGS)

        assert service.get_user_id_from_token(token) is None
