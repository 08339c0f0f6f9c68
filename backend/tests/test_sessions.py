from datetime import datetime, timedelta, timezone

from workconnect.core.security import (
    create_session_token,
    decode_session_token,
    get_password_hash,
    verify_password,
)
from workconnect.core.sessions import SessionManager

KEY = "test-signing-key-with-enough-length-0001"
OTHER_KEY = "test-signing-key-with-enough-length-0002"


def test_password_hash_round_trip():
    hashed = get_password_hash("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_establish_and_resolve():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)

    token = sessions.establish(7)

    assert sessions.resolve(token) == 7
    assert sessions.active_count() == 1


def test_resolve_rejects_missing_and_garbage_tokens():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)

    assert sessions.resolve(None) is None
    assert sessions.resolve("") is None
    assert sessions.resolve("not-a-token") is None


def test_token_from_another_server_is_rejected():
    ours = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)
    theirs = SessionManager(secret_key=OTHER_KEY, algorithm="HS256", expire_minutes=5)

    token = theirs.establish(1)

    assert ours.resolve(token) is None


def test_each_login_gets_its_own_session():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)

    first = sessions.establish(1)
    second = sessions.establish(1)
    sessions.destroy(first)

    assert sessions.resolve(first) is None
    assert sessions.resolve(second) == 1


def test_destroy_is_idempotent():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)
    token = sessions.establish(3)

    sessions.destroy(token)
    sessions.destroy(token)
    sessions.destroy(None)
    sessions.destroy("garbage")

    assert sessions.resolve(token) is None
    assert sessions.active_count() == 0


def test_expired_token_does_not_resolve_and_destroy_stays_harmless():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=-1)

    token = sessions.establish(4)

    assert sessions.resolve(token) is None
    sessions.destroy(token)
    assert sessions.active_count() == 0


def test_expired_bindings_are_purged():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=-1)

    tokens = [sessions.establish(user_id) for user_id in range(1000)]

    assert all(sessions.resolve(token) is None for token in tokens[:10])
    assert sessions.active_count() == 0


def test_purging_keeps_live_sessions():
    sessions = SessionManager(secret_key=KEY, algorithm="HS256", expire_minutes=5)
    sessions._bindings["stale"] = (99, datetime.now(timezone.utc) - timedelta(seconds=1))

    token = sessions.establish(5)

    assert "stale" not in sessions._bindings
    assert sessions.resolve(token) == 5
    assert sessions.active_count() == 1


def test_session_token_carries_only_the_session_id():
    token = create_session_token("abc", KEY, "HS256", timedelta(minutes=1))

    assert decode_session_token(token, KEY, "HS256") == "abc"
    assert decode_session_token(token, OTHER_KEY, "HS256") is None
