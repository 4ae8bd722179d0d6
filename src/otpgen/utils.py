import calendar
import datetime
import struct
import time
import unicodedata
from hmac import compare_digest
from typing import Optional, Union

MAX_COUNTER = 2**64 - 1

# Codes are compared as fixed-width native unsigned 32-bit ints
_CODE_FORMAT = "=I"
_MAX_CODE = 2**32 - 1


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret

    The counter is written most-significant byte first and left padded
    with zero bytes, so 12345 (0x3039) becomes
    b"\\x00\\x00\\x00\\x00\\x00\\x00\\x30\\x39".
    """
    if i < 0:
        raise ValueError("input must be positive integer")
    return i.to_bytes(padding, "big")


def ints_equal(a: int, b: int) -> bool:
    """
    Timing-attack resistant comparison of two unsigned 32-bit integers.

    Both sides are packed into 4 bytes and handed to compare_digest, which
    scans every byte no matter where the first difference is.
    Values that don't fit in 32 bits never compare equal.
    """
    if not (0 <= a <= _MAX_CODE and 0 <= b <= _MAX_CODE):
        return False
    return compare_digest(struct.pack(_CODE_FORMAT, a), struct.pack(_CODE_FORMAT, b))


def candidate_to_int(candidate: Union[int, str], digits: int) -> Optional[int]:
    """
    Turns a user supplied code into an int, or None if it can't possibly match.

    Strings get the same NFKC treatment pyotp gives them, so fullwidth
    digits ("４８２１９３") are accepted, and must be exactly `digits` long.
    """
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        return candidate
    if isinstance(candidate, str):
        candidate = unicodedata.normalize("NFKC", candidate).strip()
        if len(candidate) != digits or not candidate.isdecimal():
            return None
        return int(candidate)
    return None


def system_time() -> int:
    """
    Current Unix time in whole seconds, sampled from the host clock.
    """
    now = int(time.time())
    if now < 0:
        raise RuntimeError("time went backwards")
    return now


def timestamp_of(for_time: datetime.datetime) -> int:
    """
    Unix seconds for a datetime.

    Aware datetimes are converted through UTC, naive ones are taken as local time.
    """
    if for_time.tzinfo:
        seconds = calendar.timegm(for_time.utctimetuple())
    else:
        seconds = int(time.mktime(for_time.timetuple()))
    if seconds < 0:
        raise ValueError("datetime must not be before the Unix epoch")
    return seconds
