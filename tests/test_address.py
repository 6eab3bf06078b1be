import base64

import pytest

from tronkit.address import (
    ADDRESS_LENGTH,
    Address,
    decode_check,
    encode_check,
    keccak256,
    parse_tron_address,
)

VALID = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
OTHER = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"


def test_scan_valid_bytes():
    valid = Address.from_base58(VALID)
    scanned = Address.scan(bytes(valid))
    assert scanned == valid
    assert isinstance(scanned, Address)


def test_scan_rejects_non_bytes():
    with pytest.raises(TypeError):
        Address.scan("not a byte slice")


@pytest.mark.parametrize("length", [4, 22])
def test_scan_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        Address.scan(bytes(length))


def test_base58_hex_pinned():
    addr = Address.from_base58(OTHER)
    assert addr.to_hex() == "0x41364b03e0815687edaf90b81ff58e496dea7383d7"
    assert str(Address.from_hex(addr.to_hex())) == OTHER


def test_base58_round_trip():
    assert str(Address.from_base58(VALID)) == VALID
    assert len(Address.from_base58(VALID)) == ADDRESS_LENGTH


def test_bad_checksum():
    with pytest.raises(ValueError):
        Address.from_base58(VALID[:-1] + "2")


def test_invalid_character():
    with pytest.raises(ValueError):
        decode_check("0OIl")


def test_check_round_trip_with_leading_zeros():
    data = b"\x00\x00\x01\x02\xff"
    assert decode_check(encode_check(data)) == data
    assert encode_check(data).startswith("11")


def test_from_int_pads_and_prints_decimal():
    addr = Address.from_int(5)
    assert len(addr) == ADDRESS_LENGTH
    assert str(addr) == "5"


def test_from_int_too_large():
    with pytest.raises(ValueError):
        Address.from_int(2**200)


def test_empty_address_string():
    assert str(Address(b"")) == ""


def test_from_base64_round_trip():
    raw = bytes(Address.from_base58(VALID))
    assert Address.from_base64(base64.b64encode(raw).decode()) == raw


def test_from_base64_invalid():
    with pytest.raises(ValueError):
        Address.from_base64("!!!")


def test_keccak_empty():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_public_key_generator_point():
    x = bytes.fromhex("79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798")
    y = bytes.fromhex("483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8")
    full = Address.from_public_key(b"\x04" + x + y)
    compressed = Address.from_public_key(b"\x02" + x)
    assert full == compressed
    assert full.to_hex() == "0x417e5f4552091a6949c7f3c3f3b1d8c5dd2de2c3de"


def test_public_key_bad_length():
    with pytest.raises(ValueError):
        Address.from_public_key(b"\x04" * 10)


def test_parse_tron_address():
    assert str(parse_tron_address(VALID)) == VALID
    with pytest.raises(ValueError, match="not a valid one address"):
        parse_tron_address("nonsense")