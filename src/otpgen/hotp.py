import logging
from typing import Any, Optional, Union

from . import utils
from .exceptions import CounterOverflow, HashTooShort
from .hasher import DEFAULT_DIGEST, HMACHasher, KeyedHasher
from .otp import OTP

log = logging.getLogger(__name__)

DEFAULT_DIGITS = 6


def _check_digits(digits: int) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise TypeError("digits must be an integer, not {}".format(type(digits).__name__))
    if digits < 1:
        raise ValueError("digits must be at least 1")
    return digits


def _check_counter(counter: int) -> int:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise TypeError("counter must be an integer, not {}".format(type(counter).__name__))
    if not 0 <= counter <= utils.MAX_COUNTER:
        raise ValueError("counter must be between 0 and {}".format(utils.MAX_COUNTER))
    return counter


class HOTP(object):
    """
    Handler for HMAC-based OTP counters (RFC 4226).

    Owns a keyed hasher and a 64-bit counter. An instance is not safe to use
    from two threads at once, give each caller its own or lock around it.
    """

    def __init__(
        self,
        secret: bytes,
        digits: int = DEFAULT_DIGITS,
        digest: Any = DEFAULT_DIGEST,
    ) -> None:
        """
        :param secret: raw secret bytes shared with the authenticator
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param digest: digest function to use in the HMAC (expected to be SHA1)
        :raises InvalidLength: the secret was rejected by the HMAC
        """
        self._init(HMACHasher(secret, digest), digits)

    @classmethod
    def with_hasher(cls, hasher: KeyedHasher, digits: int = DEFAULT_DIGITS) -> "HOTP":
        """
        Builds a HOTP around an already keyed hasher, for callers that manage
        the key material themselves.
        """
        if not isinstance(hasher, KeyedHasher):
            raise TypeError("hasher must provide update(), finalize_reset() and digest_size")
        self = cls.__new__(cls)
        self._init(hasher, digits)
        return self

    def _init(self, hasher: KeyedHasher, digits: int) -> None:
        self._hasher = hasher
        self._digits = _check_digits(digits)
        self._counter = 0
        log.debug("HOTP ready: %d digits, %d byte digest", self._digits, hasher.digest_size)

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def digest_size(self) -> int:
        return self._hasher.digest_size

    @property
    def counter(self) -> int:
        return self._counter

    def set_counter(self, counter: int) -> None:
        self._counter = _check_counter(counter)

    def increment_counter(self) -> int:
        """
        Adds one to the counter and returns the new value.

        :raises CounterOverflow: the counter is already at MAX_COUNTER; it is left there
        """
        if self._counter >= utils.MAX_COUNTER:
            log.warning("HOTP counter is at its maximum, no further codes can be generated")
            raise CounterOverflow()
        self._counter += 1
        return self._counter

    def code(self) -> OTP:
        """
        Calculates the OTP for the current counter.
        This does NOT increment the counter!

        :raises HashTooShort: the digest can't be dynamically truncated
        """
        return self._generate_otp(self._counter)

    def code_increment(self) -> OTP:
        """
        Calculates the OTP for the current counter, then increments the counter.

        If the counter can't be incremented the code is thrown away and
        CounterOverflow is raised, so a code is never handed out for a
        counter that can't move past it.
        """
        otp = self._generate_otp(self._counter)
        self.increment_counter()
        return otp

    def at(self, counter: int) -> OTP:
        """
        Generates the OTP for the given counter, leaving the stored counter alone.

        :param counter: the OTP HMAC counter
        """
        return self._generate_otp(_check_counter(counter))

    def verify(self, otp: Union[int, str], counter: Optional[int] = None) -> bool:
        """
        Verifies the OTP passed in against the OTP for a counter.

        Does not move the counter; refusing an already used counter is up
        to the caller.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter, defaults to the current one
        """
        candidate = utils.candidate_to_int(otp, self._digits)
        expected = self.at(self._counter if counter is None else counter)
        return candidate is not None and expected.equals(candidate)

    def _generate_otp(self, counter: int) -> OTP:
        # Implements RFC 4226
        self._hasher.update(utils.int_to_bytestring(counter))
        hmac_hash = self._hasher.finalize_reset()

        # Dynamic truncation: the last nibble of the hash picks where
        # the 4 byte window starts (0-15)
        if len(hmac_hash) < 4:
            log.warning("digest of %d bytes is too short for dynamic truncation", len(hmac_hash))
            raise HashTooShort()
        offset = hmac_hash[-1] & 0x0F
        if offset + 4 > len(hmac_hash):
            log.warning("digest of %d bytes can't hold a window at offset %d", len(hmac_hash), offset)
            raise HashTooShort()

        # Top bit dropped so the result stays a positive 31 bit integer
        #   last byte 0x5a -> offset 10 -> bytes 10..13 = 50 ef 7f 19
        #   0x50ef7f19 & 0x7fffffff = 1357872921 -> % 10**6 = 872921
        code = int.from_bytes(hmac_hash[offset : offset + 4], "big") & 0x7FFFFFFF
        return OTP(code % 10**self._digits, self._digits)

    def __repr__(self) -> str:
        return "HOTP(digits={}, counter={})".format(self._digits, self._counter)
