"""Security Adapters — bcrypt hashing and JWT expiry configuration."""

import jwt

from app.infrastructure.security import BcryptPasswordHasher, JwtTokenCodec

SECRET = "security-secret-0123456789abcdef012345"


def test_hash_verifies_and_is_salted():
    hasher = BcryptPasswordHasher(rounds=4)
    first = hasher.hash("pass123")
    second = hasher.hash("pass123")
    assert first != second
    assert first != "pass123"
    assert hasher.verify("pass123", first)
    assert not hasher.verify("wrong", first)


def test_verify_against_garbage_digest_is_false():
    assert not BcryptPasswordHasher(rounds=4).verify("pass123", "not-a-bcrypt-hash")


def test_long_passwords_hash_without_error():
    hasher = BcryptPasswordHasher(rounds=4)
    long_password = "x" * 100
    assert hasher.verify(long_password, hasher.hash(long_password))


def test_no_ttl_means_no_exp_claim():
    token = JwtTokenCodec(SECRET).sign({"id": "u1"})
    assert "exp" not in jwt.decode(token, SECRET, algorithms=["HS256"])


def test_ttl_adds_exp_claim():
    codec = JwtTokenCodec(SECRET, ttl_minutes=5)
    claims = codec.verify(codec.sign({"id": "u1"}))
    assert claims["id"] == "u1"
    assert "exp" in claims
