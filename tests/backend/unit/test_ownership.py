"""
Unit tests for core.ownership module.
"""
import datetime as dt

import pytest

from miniblog.core.errors import AuthRequired, Forbidden
from miniblog.core.ownership import can_mutate, ensure_can_mutate
from miniblog.core.security import TokenClaims


def claims(subject_id: int) -> TokenClaims:
    now = dt.datetime.now(dt.timezone.utc)
    return TokenClaims(
        subject_id=subject_id,
        username=f"user{subject_id}",
        email=f"user{subject_id}@example.com",
        token_id="jti",
        issued_at=now,
        expires_at=now + dt.timedelta(minutes=5),
    )


def test_owner_can_mutate():
    assert can_mutate(3, 3) is True


def test_other_account_cannot_mutate():
    assert can_mutate(3, 4) is False


def test_ensure_can_mutate_returns_actor_for_owner():
    actor = claims(9)
    assert ensure_can_mutate(actor, 9, "posts") is actor


def test_ensure_can_mutate_forbidden_for_non_owner():
    with pytest.raises(Forbidden) as exc_info:
        ensure_can_mutate(claims(1), 2, "comments")
    assert exc_info.value.status_code == 403
    assert "comments" in exc_info.value.message


def test_ensure_can_mutate_requires_actor():
    with pytest.raises(AuthRequired):
        ensure_can_mutate(None, 2)
