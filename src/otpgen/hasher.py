import hashlib
import hmac
import logging
from typing import Any, Protocol, runtime_checkable

from .exceptions import InvalidLength

log = logging.getLogger(__name__)

DEFAULT_DIGEST = hashlib.sha1


@runtime_checkable
class KeyedHasher(Protocol):
    """
    What the generators need from a keyed hash.

    Anything with these three members can be plugged into
    HOTP.with_hasher / TOTP.with_hasher, there's nothing to subclass.
    """

    digest_size: int

    def update(self, data: bytes) -> None:
        ...

    def finalize_reset(self) -> bytes:
        """
        Return the digest of everything fed so far and get ready for the next
        message, keeping the key.
        """
        ...


class HMACHasher(object):
    """
    KeyedHasher backed by the standard library hmac module.
    """

    def __init__(self, key: bytes, digest: Any = DEFAULT_DIGEST) -> None:
        """
        :param key: raw secret bytes
        :param digest: digest function to use in the HMAC, anything hmac.new
            takes as digestmod (hashlib.sha1, hashlib.sha256, "sha512", ...)
        """
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise TypeError("key must be bytes, not {}".format(type(key).__name__))
        if len(key) == 0:
            raise InvalidLength()
        try:
            # Keyed once here, every code afterwards starts from a copy
            self._keyed = hmac.new(bytes(key), digestmod=digest)
        except (TypeError, ValueError) as e:
            raise ValueError("unsupported digest function: {!r}".format(digest)) from e
        self._state = self._keyed.copy()
        self.digest_size = self._keyed.digest_size
        log.debug("keyed %s, digest size %d bytes", self.name, self.digest_size)

    @property
    def name(self) -> str:
        return self._keyed.name

    def update(self, data: bytes) -> None:
        self._state.update(data)

    def finalize_reset(self) -> bytes:
        digest = self._state.digest()
        self._state = self._keyed.copy()
        return digest

    def __repr__(self) -> str:
        return "HMACHasher({})".format(self.name)
