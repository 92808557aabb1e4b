import pytest


@pytest.mark.parametrize("value", [2, 3, 7, 13, 31, 37, 104729, 2**61 - 1, 2**127 - 1])
def test_known_primes(value):
    from textbook_rsa.primality import is_probable_prime

    assert is_probable_prime(value)


@pytest.mark.parametrize("value", [0, 1, 4, 9, 15, 1001, 104729 * 3, 104729 * 37, 561, 2**64 + 1])
def test_known_composites(value):
    from textbook_rsa.primality import is_probable_prime

    assert not is_probable_prime(value)


def test_fixed_witness_matches_historical_behaviour():
    from textbook_rsa.primality import FIXED_WITNESS, is_probable_prime

    # 4033 = 37 * 109 is a strong pseudoprime to base 2.
    assert is_probable_prime(4033, witnesses=FIXED_WITNESS)
    assert not is_probable_prime(4033, witnesses=(2, 3))
    assert not is_probable_prime(4033, rounds=20)
    assert is_probable_prime(104729, witnesses=FIXED_WITNESS)


def test_agrees_with_pycryptodome():
    from Crypto.Util.number import isPrime

    from textbook_rsa.primality import is_probable_prime

    # Bases 2, 3, 5, 7 are exact below 3,215,031,751.
    for value in range(33, 20000, 2):
        assert is_probable_prime(value, witnesses=(2, 3, 5, 7)) == bool(isPrime(value)), value


def test_rounds_for_error_bound():
    from textbook_rsa.primality import rounds_for_error_bound

    assert rounds_for_error_bound(2.0 ** -80) == 40
    assert rounds_for_error_bound(0.25) == 1
    assert rounds_for_error_bound(0.5) == 1
    with pytest.raises(ValueError):
        rounds_for_error_bound(0.0)


def test_rejects_zero_rounds():
    from textbook_rsa.primality import is_probable_prime

    with pytest.raises(ValueError):
        is_probable_prime(104729, rounds=0)


def test_bound_is_passed_to_exponentiation():
    from textbook_rsa.errors import MagnitudeOverflowError
    from textbook_rsa.primality import FIXED_WITNESS, is_probable_prime

    mersenne = 2**2203 - 1  # prime, 2203 bits
    with pytest.raises(MagnitudeOverflowError):
        is_probable_prime(mersenne, witnesses=FIXED_WITNESS)
    assert is_probable_prime(mersenne, witnesses=FIXED_WITNESS, max_bits=8192)

    with pytest.raises(MagnitudeOverflowError):
        is_probable_prime(2**61 - 1, witnesses=FIXED_WITNESS, max_bits=64)
