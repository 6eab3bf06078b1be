"""Solidity ABI encoding of contract call parameters."""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .address import Address, keccak256

_WORD = 32
_ARRAY_RE = re.compile(r"^(.*)\[(\d*)\]$")
_BASE_RE = re.compile(r"([a-z]+)(\d*)")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[+-]?[0-9a-fA-F]+")

Param = dict[str, Any]


@dataclass(frozen=True)
class AbiType:
    """A parsed ABI type such as ``uint256``, ``bytes32`` or ``address[2]``.

    ``kind`` is one of ``int``, ``uint``, ``bool``, ``string``, ``address``,
    ``bytes``, ``fixedbytes``, ``slice`` (``T[]``) or ``array`` (``T[n]``).
    """

    kind: str
    size: int = 0
    elem: AbiType | None = None
    length: int = 0

    @classmethod
    def parse(cls, text: str) -> AbiType:
        """Parse a type string, raising ValueError when it is not supported."""
        if not text:
            raise ValueError("empty abi type")
        match = _ARRAY_RE.match(text)
        if match:
            inner, count = match.groups()
            elem = cls.parse(inner)
            if count == "":
                return cls("slice", elem=elem)
            return cls("array", elem=elem, length=int(count))
        base = _BASE_RE.fullmatch(text)
        if base is None:
            raise ValueError(f"invalid arg type in abi: {text}")
        name, digits = base.groups()
        size = int(digits) if digits else 0
        if name in ("int", "uint"):
            if not digits:
                size = 256
            if size == 0 or size > 256 or size % 8:
                raise ValueError(f"invalid {name} size: {size}")
            return cls(name, size=size)
        if name == "bytes":
            if not digits:
                return cls("bytes")
            if not 1 <= size <= 32:
                raise ValueError(f"invalid bytes size: {size}")
            return cls("fixedbytes", size=size)
        if digits:
            raise ValueError(f"invalid arg type in abi: {text}")
        if name in ("address", "bool", "string"):
            return cls(name)
        raise ValueError(f"unsupported arg type: {text}")

    @property
    def is_dynamic(self) -> bool:
        """Whether the encoding of this type is stored out of line."""
        if self.kind in ("string", "bytes", "slice"):
            return True
        if self.kind == "array":
            return self.elem.is_dynamic
        return False

    @property
    def head_size(self) -> int:
        """Bytes this type occupies in the head of an enclosing tuple."""
        if self.kind == "array" and not self.elem.is_dynamic:
            return self.length * self.elem.head_size
        return _WORD

    def __str__(self) -> str:
        if self.kind == "slice":
            return f"{self.elem}[]"
        if self.kind == "array":
            return f"{self.elem}[{self.length}]"
        if self.kind in ("int", "uint"):
            return f"{self.kind}{self.size}"
        if self.kind == "fixedbytes":
            return f"bytes{self.size}"
        return self.kind


@dataclass(frozen=True)
class Argument:
    """One named input or output of a contract method."""

    name: str
    type: AbiType
    indexed: bool = False


def load_from_json(text: str) -> list[Param]:
    """Parse a JSON list of single-entry ``{type: value}`` objects."""
    if not text:
        return []
    data = json.loads(text)
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("parameters must be a JSON array of objects")
    return data


def signature(method: str) -> bytes:
    """Return the four-byte selector of a method signature."""
    return keccak256(method.encode("utf-8"))[:4]


def _to_address(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"invalid address {value!r}")
    try:
        addr = Address.from_base58(value)
    except ValueError as exc:
        raise ValueError(f"invalid address {value}: {exc}") from exc
    return bytes(addr[-20:])


def _to_int(ty: AbiType, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"invalid {ty} value {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if ty.size <= 64:
            if _DECIMAL_RE.fullmatch(value):
                return int(value)
        elif value.startswith("0x"):
            if _HEX_RE.fullmatch(value[2:]):
                return int(value[2:], 16)
        elif _DECIMAL_RE.fullmatch(value):
            return int(value)
    raise ValueError(f"invalid {ty} value {value!r}")


def _to_bytes(ty: AbiType, value: Any) -> bytes:
    if isinstance(value, str):
        try:
            data = binascii.unhexlify(value)
        except (binascii.Error, ValueError):
            try:
                data = base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"invalid {ty} value {value!r}: {exc}") from exc
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise ValueError(f"invalid {ty} value {value!r}")
    if ty.kind == "fixedbytes" and len(data) != ty.size:
        raise ValueError(f"invalid size: {ty.size}/{len(data)}")
    return data


def _coerce(ty: AbiType, value: Any) -> Any:
    kind = ty.kind
    if kind == "address":
        return _to_address(value)
    if kind in ("int", "uint"):
        return _to_int(ty, value)
    if kind in ("bytes", "fixedbytes"):
        return _to_bytes(ty, value)
    if kind == "bool":
        if isinstance(value, bool):
            return value
        raise ValueError(f"invalid bool value {value!r}")
    if kind == "string":
        if isinstance(value, str):
            return value
        raise ValueError(f"invalid string value {value!r}")
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise ValueError(f"unable to convert {value!r} to {ty}")
    items = [_coerce(ty.elem, item) for item in value]
    if kind == "array" and len(items) != ty.length:
        raise ValueError(f"{ty} needs {ty.length} elements, got {len(items)}")
    return items


def _word(number: int) -> bytes:
    return number.to_bytes(_WORD, "big")


def _encode(ty: AbiType, value: Any) -> bytes:
    kind = ty.kind
    if kind == "uint":
        if not 0 <= value < 1 << ty.size:
            raise ValueError(f"value {value} out of range for {ty}")
        return _word(value)
    if kind == "int":
        bound = 1 << (ty.size - 1)
        if not -bound <= value < bound:
            raise ValueError(f"value {value} out of range for {ty}")
        return _word(value % (1 << 256))
    if kind == "bool":
        return _word(int(value))
    if kind == "address":
        return value.rjust(_WORD, b"\0")
    if kind == "fixedbytes":
        return value.ljust(_WORD, b"\0")
    if kind in ("bytes", "string"):
        data = value.encode("utf-8") if isinstance(value, str) else value
        padded = data.ljust((len(data) + _WORD - 1) // _WORD * _WORD, b"\0")
        return _word(len(data)) + padded
    body = _encode_tuple([ty.elem] * len(value), value)
    if kind == "slice":
        return _word(len(value)) + body
    return body


def _encode_tuple(types: Sequence[AbiType], values: Sequence[Any]) -> bytes:
    offset = sum(ty.head_size for ty in types)
    heads: list[bytes] = []
    tails: list[bytes] = []
    for ty, value in zip(types, values):
        encoded = _encode(ty, value)
        if ty.is_dynamic:
            heads.append(_word(offset))
            tails.append(encoded)
            offset += len(encoded)
        else:
            heads.append(encoded)
    return b"".join(heads) + b"".join(tails)


def get_padded_param(params: Iterable[Mapping[str, Any]]) -> bytes:
    """ABI-encode a list of ``{type: value}`` parameters."""
    types: list[AbiType] = []
    values: list[Any] = []
    for param in params:
        if not isinstance(param, Mapping) or len(param) != 1:
            raise ValueError(f"invalid param {param!r}")
        ((type_text, value),) = param.items()
        try:
            ty = AbiType.parse(type_text)
        except ValueError as exc:
            raise ValueError(f"invalid param {param!r}: {exc}") from exc
        types.append(ty)
        values.append(_coerce(ty, value))
    return _encode_tuple(types, values)


def pack(method: str, params: Iterable[Mapping[str, Any]]) -> bytes:
    """Return the method selector followed by the encoded parameters."""
    return signature(method) + get_padded_param(params)


def _entries(abi: Any) -> Iterable[Mapping[str, Any]]:
    if isinstance(abi, Mapping):
        return abi.get("entrys", abi.get("entries", []))
    return abi


def _arguments(abi: Any, method: str, key: str) -> list[Argument]:
    for entry in _entries(abi):
        if entry.get("name") != method:
            continue
        arguments = []
        for item in entry.get(key) or []:
            try:
                ty = AbiType.parse(item["type"])
            except ValueError as exc:
                raise ValueError(f"invalid param {item['type']}: {exc}") from exc
            arguments.append(
                Argument(item.get("name", ""), ty, bool(item.get("indexed", False)))
            )
        return arguments
    raise LookupError("not found")


def get_parser(abi: Any, method: str) -> list[Argument]:
    """Return the output arguments of ``method`` in a contract ABI."""
    return _arguments(abi, method, "outputs")


def get_inputs_parser(abi: Any, method: str) -> list[Argument]:
    """Return the input arguments of ``method`` in a contract ABI."""
    return _arguments(abi, method, "inputs")