"""
HOTP (RFC 4226) and TOTP (RFC 6238) one-time passwords.

    >>> hotp = HOTP(b"12345678901234567890")
    >>> str(hotp.code_increment()), str(hotp.code_increment())
    ('755224', '287082')
    >>> totp = TOTP(b"12345678901234567890", digits=8, skew=0, time_source=lambda: 59)
    >>> str(totp.code())
    '94287082'
"""
import logging

from .exceptions import CounterOverflow as CounterOverflow
from .exceptions import HashTooShort as HashTooShort
from .exceptions import InvalidLength as InvalidLength
from .exceptions import OTPError as OTPError
from .hasher import DEFAULT_DIGEST as DEFAULT_DIGEST
from .hasher import HMACHasher as HMACHasher
from .hasher import KeyedHasher as KeyedHasher
from .hotp import DEFAULT_DIGITS as DEFAULT_DIGITS
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import DEFAULT_INTERVAL as DEFAULT_INTERVAL
from .totp import DEFAULT_SKEW as DEFAULT_SKEW
from .totp import TOTP as TOTP
from .utils import MAX_COUNTER as MAX_COUNTER

logging.getLogger(__name__).addHandler(logging.NullHandler())
