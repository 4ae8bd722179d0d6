import operator

import pytest

from otpgen import OTP


def test_render_pads_with_zeros():
    assert str(OTP(7081804, 8)) == "07081804"
    assert OTP(0, 6).render() == "000000"
    assert OTP(5, 1).render() == "5"


def test_numeric_coercion():
    otp = OTP(755224, 6)
    assert int(otp) == 755224
    assert operator.index(otp) == 755224
    assert otp.value == 755224
    assert otp.digits == 6


def test_equals_every_byte_position():
    value = 0x01020304
    otp = OTP(value, 10)
    assert otp.equals(value)
    for shift in range(4):
        assert not otp.equals(value ^ (0xFF << (8 * shift)))
        assert not otp.equals(value ^ (0x01 << (8 * shift)))


def test_equals_out_of_range_and_non_int():
    otp = OTP(0, 6)
    assert not otp.equals(-1)
    assert not otp.equals(2**32)
    assert not otp.equals("000000")
    assert not otp.equals(False)


def test_eq_operator():
    otp = OTP(287082, 6)
    assert otp == 287082
    assert otp != 287083
    assert otp == OTP(287082, 6)
    assert otp != OTP(287082, 7)
    assert otp != "287082"
    assert hash(otp) == hash(OTP(287082, 6))


@pytest.mark.parametrize("value,digits", [(1000000, 6), (-1, 6), (10, 1), (0, 0)])
def test_rejects_values_outside_width(value, digits):
    with pytest.raises(ValueError):
        OTP(value, digits)


def test_immutable():
    otp = OTP(1, 6)
    with pytest.raises(AttributeError):
        otp._value = 2
    with pytest.raises(AttributeError):
        otp.value = 2
    assert otp == 1


def test_repr():
    assert repr(OTP(42, 6)) == "OTP('000042', digits=6)"
