# 보안 유닛 테스트 (DB 의존성 없음)
from datetime import datetime, timedelta, timezone
import jwt
import pytest
from myflix_api.core.security import (
    get_password_hash,
    verify_password,
    create_token,
    create_access_token,
    decode_access_token,
)
from myflix_api.core.config import settings
from myflix_api.core.exceptions import AuthenticationError

def test_password_hash_and_verify():
    pw = "S3cure!"
    hashed = get_password_hash(pw)
    assert hashed != pw
    assert verify_password(pw, hashed)
    assert not verify_password("wrong", hashed)

def test_password_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")

def test_create_access_token():
    token = create_access_token("alice01")
    decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert decoded["sub"] == "alice01"
    assert decoded["type"] == "access"
    lifetime = decoded["exp"] - decoded["iat"]
    assert lifetime == timedelta(days=7).total_seconds()

def test_decode_access_token_returns_username():
    assert decode_access_token(create_access_token("alice01")) == "alice01"

def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token("alice01").split(".")
    tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]
    with pytest.raises(AuthenticationError):
        decode_access_token(f"{header}.{payload}.{tampered_signature}")

def test_token_signed_with_other_secret_is_rejected():
    token = create_token({"sub": "alice01", "type": "access"}, timedelta(days=7), secret="another-secret")
    with pytest.raises(AuthenticationError):
        decode_access_token(token)

def test_expired_token_is_rejected():
    token = create_token({"sub": "alice01", "type": "access"}, timedelta(seconds=-10))
    with pytest.raises(AuthenticationError):
        decode_access_token(token)

@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_malformed_token_is_rejected(token):
    with pytest.raises(AuthenticationError):
        decode_access_token(token)

def test_non_access_token_is_rejected():
    token = create_token({"sub": "alice01", "type": "refresh"}, timedelta(days=1))
    with pytest.raises(AuthenticationError):
        decode_access_token(token)

def test_decode_with_explicit_secret():
    now = datetime.now(tz=timezone.utc)
    token = jwt.encode({"sub": "bob0001", "type": "access", "exp": now + timedelta(minutes=5)}, "s3", algorithm="HS256")
    assert decode_access_token(token, secret="s3") == "bob0001"
