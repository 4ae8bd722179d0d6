import datetime
import logging
from typing import Any, Callable, Optional, Union

from . import utils
from .hasher import DEFAULT_DIGEST, KeyedHasher
from .hotp import DEFAULT_DIGITS, HOTP
from .otp import OTP

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30
DEFAULT_SKEW = 1

TimeSource = Callable[[], int]


class TOTP(object):
    """
    Handler for time-based OTP counters (RFC 6238).

    The counter is never stored: it is worked out from a timestamp every time,
    as timestamp // interval. The current time comes from `time_source`, a
    zero-argument callable returning Unix seconds, so a fixed stub works just
    as well as the host clock.
    """

    def __init__(
        self,
        secret: bytes,
        digits: int = DEFAULT_DIGITS,
        interval: int = DEFAULT_INTERVAL,
        skew: int = DEFAULT_SKEW,
        time_source: Optional[TimeSource] = None,
        digest: Any = DEFAULT_DIGEST,
    ) -> None:
        """
        :param secret: raw secret bytes shared with the authenticator
        :param digits: number of integers in the OTP
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param skew: how many steps before and after the current one validate_code accepts
        :param time_source: returns the current Unix time in seconds, defaults to the host clock
        :param digest: digest function to use in the HMAC (expected to be SHA1)
        :raises InvalidLength: the secret was rejected by the HMAC
        """
        self._init(HOTP(secret, digits=digits, digest=digest), interval, skew, time_source)

    @classmethod
    def from_system_time(
        cls,
        secret: bytes,
        digits: int = DEFAULT_DIGITS,
        interval: int = DEFAULT_INTERVAL,
        skew: int = DEFAULT_SKEW,
        digest: Any = DEFAULT_DIGEST,
    ) -> "TOTP":
        return cls(secret, digits=digits, interval=interval, skew=skew, time_source=utils.system_time, digest=digest)

    @classmethod
    def with_hasher(
        cls,
        hasher: KeyedHasher,
        digits: int = DEFAULT_DIGITS,
        interval: int = DEFAULT_INTERVAL,
        skew: int = DEFAULT_SKEW,
        time_source: Optional[TimeSource] = None,
    ) -> "TOTP":
        self = cls.__new__(cls)
        self._init(HOTP.with_hasher(hasher, digits=digits), interval, skew, time_source)
        return self

    def _init(self, hotp: HOTP, interval: int, skew: int, time_source: Optional[TimeSource]) -> None:
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise TypeError("interval must be an integer")
        if interval < 1:
            raise ValueError("interval must be at least 1 second")
        if isinstance(skew, bool) or not isinstance(skew, int):
            raise TypeError("skew must be an integer")
        if skew < 0:
            raise ValueError("skew must not be negative")
        if time_source is not None and not callable(time_source):
            raise TypeError("time_source must be callable")

        self._hotp = hotp
        self._interval = interval
        self._skew = skew
        self._time_source = time_source or utils.system_time
        log.debug("TOTP ready: %d digits, %ds interval, skew %d", hotp.digits, interval, skew)

    @property
    def digits(self) -> int:
        return self._hotp.digits

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def skew(self) -> int:
        return self._skew

    def timecode(self, timestamp: int) -> int:
        """
        The time-step counter for a Unix timestamp.
        """
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise TypeError("timestamp must be an integer number of seconds")
        if timestamp < 0:
            raise ValueError("timestamp must not be negative")
        return timestamp // self._interval

    def code_at_time(self, timestamp: int) -> OTP:
        """
        Calculates the OTP for a time given as seconds since the Unix epoch.

        :raises HashTooShort: the digest can't be dynamically truncated
        """
        self._hotp.set_counter(self.timecode(timestamp))
        return self._hotp.code()

    def code_at_datetime(self, for_time: datetime.datetime) -> OTP:
        return self.code_at_time(utils.timestamp_of(for_time))

    def code(self) -> OTP:
        """
        Calculates the OTP for the current time.
        """
        return self.code_at_time(self._time_source())

    def validate_code(self, candidate: Union[int, str], for_time: Optional[int] = None) -> bool:
        """
        Checks a code against every step in [now - skew, now + skew].

        Each comparison is constant time, but the loop returns on the first
        match, so total time still depends on the window size and position.

        :param candidate: the code the user supplied
        :param for_time: Unix seconds to validate at, defaults to time_source()
        """
        code = utils.candidate_to_int(candidate, self.digits)
        if code is None:
            log.debug("rejected malformed TOTP candidate")
            return False

        current = self.timecode(self._time_source() if for_time is None else for_time)
        first = max(current - self._skew, 0)
        last = min(current + self._skew, utils.MAX_COUNTER)
        for counter in range(first, last + 1):
            self._hotp.set_counter(counter)
            if self._hotp.code().equals(code):
                log.debug("TOTP candidate accepted")
                return True
        log.debug("TOTP candidate rejected")
        return False

    def __repr__(self) -> str:
        return "TOTP(digits={}, interval={}, skew={})".format(self.digits, self._interval, self._skew)
