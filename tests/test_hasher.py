import hashlib
import hmac

import pytest

from otpgen import HMACHasher, InvalidLength, KeyedHasher

from .conftest import SHA1_SECRET, FixedDigestHasher


def test_finalize_reset_keeps_key():
    hasher = HMACHasher(SHA1_SECRET)
    expected = hmac.new(SHA1_SECRET, b"message", hashlib.sha1).digest()
    for _ in range(3):
        hasher.update(b"mess")
        hasher.update(b"age")
        assert hasher.finalize_reset() == expected


@pytest.mark.parametrize("digest,size", [(hashlib.sha1, 20), (hashlib.sha256, 32), ("sha512", 64)])
def test_digest_size(digest, size):
    assert HMACHasher(SHA1_SECRET, digest).digest_size == size


def test_name():
    assert HMACHasher(SHA1_SECRET, hashlib.sha256).name == "hmac-sha256"


def test_empty_key():
    with pytest.raises(InvalidLength):
        HMACHasher(b"")


def test_key_must_be_bytes():
    with pytest.raises(TypeError):
        HMACHasher("12345678901234567890")
    assert HMACHasher(bytearray(SHA1_SECRET)).digest_size == 20


def test_unknown_digest():
    with pytest.raises(ValueError):
        HMACHasher(SHA1_SECRET, "no-such-hash")


def test_protocol_conformance():
    assert isinstance(HMACHasher(SHA1_SECRET), KeyedHasher)
    assert isinstance(FixedDigestHasher(bytes(20)), KeyedHasher)
    assert not isinstance(object(), KeyedHasher)
