import pytest

from vertex.errors import PasswordHashingFailed
from vertex.services.password_hasher import PasswordHasher


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


def test_hash_is_never_the_plaintext(hasher):
    hashed = hasher.hash("secret")
    assert hashed != "secret"
    assert hashed.startswith("$2")


def test_hash_uses_fresh_salt(hasher):
    assert hasher.hash("secret") != hasher.hash("secret")


def test_hash_embeds_work_factor():
    assert PasswordHasher(rounds=5).hash("secret").split("$")[2] == "05"


def test_verify_accepts_original_secret(hasher):
    assert hasher.verify("secret", hasher.hash("secret")) is True


@pytest.mark.parametrize("attempt", ["Secret", "secret ", "secre", "", "wrong"])
def test_verify_rejects_altered_secret(hasher, attempt):
    assert hasher.verify(attempt, hasher.hash("secret")) is False


def test_verify_malformed_hash_is_false(hasher):
    assert hasher.verify("secret", "not-a-bcrypt-hash") is False
    assert hasher.verify("secret", None) is False


def test_hash_failure_raises(hasher):
    with pytest.raises(PasswordHashingFailed):
        hasher.hash(None)


def test_long_password_hashes_and_verifies(hasher):
    secret = "p" * 80
    hashed = hasher.hash(secret)
    assert hasher.verify(secret, hashed) is True
    assert hasher.verify("q" * 80, hashed) is False


def test_multibyte_password_beyond_limit(hasher):
    secret = "é" * 50
    assert hasher.verify(secret, hasher.hash(secret)) is True
