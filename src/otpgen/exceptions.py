class OTPError(Exception):
    """
    Base class for errors raised while building or running an OTP generator.
    """

    default_message = "one-time password error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class InvalidLength(OTPError, ValueError):
    """
    The keyed hash rejected the secret (e.g. an empty key).
    """

    default_message = "attempted to create a HOTP instance with an invalid key length"


class HashTooShort(OTPError, ValueError):
    """
    The digest is too short for dynamic truncation to pick an offset and read 4 bytes.

    This is a configuration problem with the chosen hash, retrying won't help.
    """

    default_message = "the hash function used in the HOTP instance's output is too short"


class CounterOverflow(OTPError, OverflowError):
    """
    The counter is already at its maximum value and cannot be incremented.
    """

    default_message = "the HOTP instance's counter has overflowed"
