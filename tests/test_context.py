"""Tests for the per-request user session."""

from __future__ import annotations

import pytest

from budgettracker.context import UserSession
from budgettracker.errors import AuthenticationError


def test_session_with_user():
    session = UserSession(user_id="user-1")

    assert session.is_authenticated
    assert session.require_user_id() == "user-1"


@pytest.mark.parametrize("user_id", [None, ""])
def test_anonymous_session_raises(user_id):
    session = UserSession(user_id=user_id)

    assert not session.is_authenticated
    with pytest.raises(AuthenticationError, match="Sign in required"):
        session.require_user_id()


def test_blank_user_header_is_unauthorized(client):
    response = client.get("/transactions/", headers={"X-User-Id": "   "})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Sign in required"}
