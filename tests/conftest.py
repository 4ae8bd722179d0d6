import pytest

# RFC 4226 appendix D / RFC 6238 appendix B seeds
SHA1_SECRET = b"12345678901234567890"
SHA256_SECRET = b"12345678901234567890123456789012"
SHA512_SECRET = b"1234567890123456789012345678901234567890123456789012345678901234"


class FixedDigestHasher(object):
    """
    KeyedHasher that ignores its input and always returns the same digest.
    """

    def __init__(self, digest: bytes) -> None:
        self.digest = digest
        self.digest_size = len(digest)
        self.updates = []
        self.pending = b""

    def update(self, data: bytes) -> None:
        self.updates.append(data)
        self.pending += data

    def finalize_reset(self) -> bytes:
        self.pending = b""
        return self.digest


class Clock(object):
    """
    Settable time source.
    """

    def __init__(self, now: int = 0) -> None:
        self.now = now
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.now


@pytest.fixture
def clock():
    return Clock()
