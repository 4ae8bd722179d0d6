from typing import Any

from . import utils


class OTP(object):
    """
    A one-time password.

    Behaves like the number it holds (int(), operator.index()), renders
    zero padded to its digit count, and compares against raw integers in
    constant time. Instances come out of HOTP/TOTP; constructing one by hand
    only succeeds for values that fit the digit count.
    """

    __slots__ = ("_value", "_digits")

    def __init__(self, value: int, digits: int) -> None:
        if not isinstance(value, int) or not isinstance(digits, int):
            raise TypeError("value and digits must be integers")
        if digits < 1:
            raise ValueError("digits must be at least 1")
        if not 0 <= value < 10**digits:
            raise ValueError("value does not fit in {} digits".format(digits))
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_digits", digits)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("OTP objects are immutable")

    @property
    def value(self) -> int:
        return self._value

    @property
    def digits(self) -> int:
        return self._digits

    def equals(self, raw: int) -> bool:
        """
        Constant-time comparison against a raw integer.

        Use this (or ==) for anything a user typed in.
        """
        if isinstance(raw, bool) or not isinstance(raw, int):
            return False
        return utils.ints_equal(self._value, raw)

    def render(self) -> str:
        # 472956 with 8 digits -> "00472956"
        return "{:0{width}d}".format(self._value, width=self._digits)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OTP):
            return utils.ints_equal(self._value, other._value) & (self._digits == other._digits)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._value, self._digits))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return "OTP({!r}, digits={})".format(self.render(), self._digits)
