"""Tests for BcryptPasswordHasher."""

from bloodlink.adapters.security.bcrypt_hasher import BcryptPasswordHasher


def test_hash_and_verify():
    hasher = BcryptPasswordHasher(rounds=4)
    hashed = hasher.hash("s3cret!")
    assert hashed != "s3cret!"
    assert hasher.verify("s3cret!", hashed)
    assert not hasher.verify("wrong", hashed)


def test_verify_rejects_non_bcrypt_value():
    assert BcryptPasswordHasher(rounds=4).verify("anything", "plain-text") is False
