import pytest


def test_textbook_vector():
    from textbook_rsa.codec import decode, encode
    from textbook_rsa.keys import PrivateKey, PublicKey

    cipher = encode(65, PublicKey(e=17, n=3233))
    assert cipher == 2790
    assert decode(cipher, PrivateKey(d=2753, n=3233)) == 65


def test_round_trip_small_modulus_exhaustive():
    from textbook_rsa.codec import decode, encode
    from textbook_rsa.keys import generate_key_pair

    keys = generate_key_pair(61, 53, 6, public_exponent=17)
    for message in range(keys.n):
        assert decode(encode(message, keys.public_key), keys.private_key) == message


def test_round_trip_generated_key():
    from textbook_rsa.codec import decode, encode
    from textbook_rsa.config import RsaConfig
    from textbook_rsa.keys import generate_keys
    from textbook_rsa.primes import RandomBitSource

    keys = generate_keys(config=RsaConfig(bit_length=128, error_bound=2.0 ** -40))
    source = RandomBitSource(99)
    messages = [0, 1, 2, 1230948092384098, keys.n - 1]
    messages += [source.bits(255) % keys.n for _ in range(10)]
    for message in messages:
        assert decode(encode(message, keys.public_key), keys.private_key) == message


def test_oversized_message_is_an_error():
    from textbook_rsa.codec import encode
    from textbook_rsa.errors import MessageTooLargeError
    from textbook_rsa.keys import PublicKey

    public_key = PublicKey(e=17, n=3233)
    with pytest.raises(MessageTooLargeError):
        encode(3233, public_key)
    with pytest.raises(MessageTooLargeError):
        encode(10**6, public_key)
    with pytest.raises(ValueError):
        encode(-1, public_key)


def test_cipher_out_of_range():
    from textbook_rsa.codec import decode
    from textbook_rsa.keys import PrivateKey

    with pytest.raises(ValueError):
        decode(3233, PrivateKey(d=2753, n=3233))


def test_encode_honours_the_key_bound():
    from textbook_rsa.codec import decode, encode
    from textbook_rsa.errors import MagnitudeOverflowError
    from textbook_rsa.keys import PrivateKey, PublicKey

    n = 4294967291 * 4294967279  # 64 bits
    with pytest.raises(MagnitudeOverflowError):
        encode(n - 1, PublicKey(e=65537, n=n, max_bits=64))
    with pytest.raises(MagnitudeOverflowError):
        decode(n - 1, PrivateKey(d=3, n=n, max_bits=64))

    cipher = encode(n - 1, PublicKey(e=65537, n=n, max_bits=64), max_bits=128)
    assert cipher == pow(n - 1, 65537, n)
    assert decode(cipher, PrivateKey(d=3, n=n), max_bits=128) == pow(cipher, 3, n)


def test_generated_key_round_trips_under_custom_bound():
    from textbook_rsa.codec import decode, encode
    from textbook_rsa.config import RsaConfig
    from textbook_rsa.keys import generate_key_pair

    keys = generate_key_pair(
        4294967291, 4294967279, 32, public_exponent=65537, config=RsaConfig(max_bits=128)
    )
    message = keys.n - 1
    assert decode(encode(message, keys.public_key), keys.private_key) == message
