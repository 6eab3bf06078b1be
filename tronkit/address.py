"""Tron account addresses and the Base58Check encoding they use."""

from __future__ import annotations

import base64
import binascii
import hashlib

from Crypto.Hash import keccak

HASH_LENGTH = 32
ADDRESS_LENGTH = 21
ADDRESS_LENGTH_BASE58 = 34
TRON_BYTE_PREFIX = 0x41

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}

# secp256k1 field prime, used to decompress public keys.
_FIELD_PRIME = 2**256 - 2**32 - 977


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _checksum(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:4]


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading_ones + body


def encode_check(data: bytes) -> str:
    """Encode ``data`` as Base58 with a double-SHA256 checksum appended."""
    data = bytes(data)
    return _b58encode(data + _checksum(data))


def decode_check(text: str) -> bytes:
    """Decode a Base58Check string, verifying its checksum."""
    raw = _b58decode(text)
    if len(raw) < 4:
        raise ValueError("b58 check error")
    payload, checksum = raw[:-4], raw[-4:]
    if _checksum(payload) != checksum:
        raise ValueError("b58 check error")
    return payload


def _uncompressed_point(public_key: bytes) -> bytes:
    key = bytes(public_key)
    if len(key) == 65 and key[0] == 0x04:
        return key[1:]
    if len(key) == 64:
        return key
    if len(key) == 33 and key[0] in (0x02, 0x03):
        x = int.from_bytes(key[1:], "big")
        if x >= _FIELD_PRIME:
            raise ValueError("invalid public key")
        rhs = (pow(x, 3, _FIELD_PRIME) + 7) % _FIELD_PRIME
        y = pow(rhs, (_FIELD_PRIME + 1) // 4, _FIELD_PRIME)
        if y * y % _FIELD_PRIME != rhs:
            raise ValueError("invalid public key: point not on curve")
        if y & 1 != key[0] & 1:
            y = _FIELD_PRIME - y
        return key[1:] + y.to_bytes(32, "big")
    raise ValueError(f"invalid public key length {len(key)}")


class Address(bytes):
    """A 21-byte Tron account address."""

    def __str__(self) -> str:
        if not self:
            return ""
        if self[0] == 0:
            return str(int.from_bytes(self, "big"))
        return encode_check(bytes(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self)!r})"

    def to_hex(self) -> str:
        """Return the address as a 0x-prefixed hex string."""
        return "0x" + (self.hex() or "0")

    @classmethod
    def from_int(cls, value: int) -> Address:
        """Build an address from an integer, left-padded with zero bytes."""
        if value < 0:
            raise ValueError("address value cannot be negative")
        body = value.to_bytes((value.bit_length() + 7) // 8, "big")
        if len(body) > ADDRESS_LENGTH:
            raise ValueError(f"value needs {len(body)} bytes, more than {ADDRESS_LENGTH}")
        return cls(body.rjust(ADDRESS_LENGTH, b"\0"))

    @classmethod
    def from_hex(cls, text: str) -> Address:
        """Build an address from a hex string, with or without a 0x prefix."""
        if text[:2] in ("0x", "0X"):
            text = text[2:]
        if not text:
            raise ValueError("empty hex string")
        if len(text) % 2:
            text = "0" + text
        return cls(bytes.fromhex(text))

    @classmethod
    def from_base58(cls, text: str) -> Address:
        """Build an address from its Base58Check form."""
        payload = decode_check(text)
        if len(payload) != ADDRESS_LENGTH:
            raise ValueError(f"invalid address length: {len(payload)}")
        if payload[0] != TRON_BYTE_PREFIX:
            raise ValueError("invalid address prefix")
        return cls(payload)

    @classmethod
    def from_base64(cls, text: str) -> Address:
        """Build an address from standard Base64."""
        try:
            return cls(base64.b64decode(text, validate=True))
        except binascii.Error as exc:
            raise ValueError(f"invalid base64: {exc}") from exc

    @classmethod
    def from_public_key(cls, public_key: bytes) -> Address:
        """Derive the address of a secp256k1 public key (compressed or not)."""
        point = _uncompressed_point(public_key)
        return cls(bytes([TRON_BYTE_PREFIX]) + keccak256(point)[12:])

    @classmethod
    def scan(cls, src: object) -> Address:
        """Build an address from a raw database value."""
        if not isinstance(src, (bytes, bytearray)):
            raise TypeError(f"can't scan {type(src).__name__} into Address")
        if len(src) != ADDRESS_LENGTH:
            raise ValueError(
                f"can't scan bytes of len {len(src)} into Address, want {ADDRESS_LENGTH}"
            )
        return cls(bytes(src))


def parse_tron_address(text: str) -> Address:
    """Validate a Base58 address given on the command line."""
    try:
        return Address.from_base58(text)
    except ValueError as exc:
        raise ValueError(f"not a valid one address: {exc}") from exc