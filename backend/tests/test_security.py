"""
Tests for the admin token helpers.
"""

from datetime import timedelta

import pytest

from athenaeum.shared.utils.security import SecurityUtils

SECRET = "unit-test-secret"


class TestAdminIdFromToken:

    def test_round_trip(self):
        token = SecurityUtils.create_access_token({"admin_id": 7}, SECRET)

        assert SecurityUtils.admin_id_from_token(token, SECRET) == 7

    def test_string_admin_id_is_accepted(self):
        token = SecurityUtils.create_access_token({"admin_id": "7"}, SECRET)

        assert SecurityUtils.admin_id_from_token(token, SECRET) == 7

    def test_wrong_secret(self):
        token = SecurityUtils.create_access_token({"admin_id": 7}, SECRET)

        with pytest.raises(ValueError, match="Invalid token"):
            SecurityUtils.admin_id_from_token(token, "another-secret")

    def test_expired(self):
        token = SecurityUtils.create_access_token(
            {"admin_id": 7}, SECRET, expires_delta=timedelta(seconds=-1)
        )

        with pytest.raises(ValueError, match="expired"):
            SecurityUtils.admin_id_from_token(token, SECRET)

    @pytest.mark.parametrize("claims", [{}, {"admin_id": None}, {"admin_id": True}, {"admin_id": "x"}])
    def test_unusable_claim(self, claims):
        token = SecurityUtils.create_access_token(claims, SECRET)

        with pytest.raises(ValueError):
            SecurityUtils.admin_id_from_token(token, SECRET)
