import pytest


@pytest.mark.parametrize("base", [0, 1, 2, 7, 123456789, -5])
@pytest.mark.parametrize("modulus", [2, 3, 97, 3233, 2**61 - 1])
def test_zero_exponent_is_one(base, modulus):
    from textbook_rsa.modexp import mod_pow

    assert mod_pow(base, 0, modulus) == 1


@pytest.mark.parametrize("base", [0, 1, 2, 65, 3232, 3233, 99999, -4])
def test_unit_exponent_reduces_base(base):
    from textbook_rsa.modexp import mod_pow

    assert mod_pow(base, 1, 3233) == base % 3233


def test_matches_builtin_pow():
    from textbook_rsa.modexp import mod_pow

    modulus = (1 << 127) - 1
    for base, exponent in [(3, 10**20), (2**100 + 7, 65537), (12345, 2**64 - 1)]:
        assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_modulus_one_gives_zero():
    from textbook_rsa.modexp import mod_pow

    assert mod_pow(5, 0, 1) == 0
    assert mod_pow(5, 3, 1) == 0


def test_invalid_arguments():
    from textbook_rsa.modexp import mod_pow

    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_modulus_beyond_bound_raises():
    from textbook_rsa.errors import MagnitudeOverflowError
    from textbook_rsa.modexp import mod_pow

    with pytest.raises(MagnitudeOverflowError):
        mod_pow(2, 3, 1 << 2048)  # 2049-bit modulus
    assert mod_pow(2, 3, (1 << 2048) - 1) == 8
    assert mod_pow(2, 3, 1 << 40, max_bits=100) == 8
    with pytest.raises(OverflowError):
        mod_pow(2, 3, 1 << 60, max_bits=100)
