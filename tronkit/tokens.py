"""Parameter handling and summaries for TRC10 token commands."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from .address import Address

MAX_DECIMALS = 6
_RATIO_LIMIT = 10**6
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def validate_decimals(decimals: int) -> int:
    """Check that a token precision lies between 0 and 6."""
    if decimals > MAX_DECIMALS or decimals < 0:
        raise ValueError(f"decimals should be >= 0 && <= 6, found {decimals}")
    return decimals


def parse_start_date(text: str, now: datetime | None = None) -> datetime:
    """Parse an issue start date, which must not lie before ``now``.

    Dates without a zone are taken as UTC.
    """
    try:
        start = date_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"invalid start date {text!r}: {exc}") from exc
    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if start < now:
        raise ValueError("start date cannot be prior issue")
    return start


def _parse_int(text: str, low: int, high: int) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not low <= value <= high:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid syntax: {text!r}")
    return float(text)


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def parse_ratio(text: str) -> tuple[int, int]:
    """Parse a TRX-to-token ratio into ``(trx_num, token_num)``.

    The ratio is either ``TRX:TOKENS`` or a decimal number, which is cut to
    six decimal places and turned into a whole-number pair.
    """
    head, colon, tail = text.partition(":")
    if colon:
        trx_num = _parse_int(head, _INT32_MIN, _INT32_MAX)
        token_num = _parse_int(tail, _INT32_MIN, _INT32_MAX)
        return trx_num, token_num

    ratio = _to_float32(_parse_float(text))
    if not math.isfinite(ratio):
        raise ValueError("invalid ratio")
    ratio = int(ratio * _RATIO_LIMIT) / _RATIO_LIMIT
    token_num = 1
    while float(int(ratio)) != ratio and token_num <= _RATIO_LIMIT:
        ratio *= 10
        token_num *= 10
    if token_num > _RATIO_LIMIT:
        raise ValueError("invalid ratio")
    return int(ratio), token_num


def parse_frozen_supply(entries: Iterable[str], decimals: int) -> dict[str, str]:
    """Parse ``days:amount`` entries, scaling each amount by the token precision."""
    frozen: dict[str, str] = {}
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ValueError(f"invalid frozen supply {parts}")
        days, amount_text = parts
        if frozen.get(days):
            raise ValueError(f"frozen supply date collision {days}:{frozen[days]} -> {entry}")
        try:
            amount = _parse_float(amount_text) * float(10**decimals)
            frozen[days] = str(int(amount))
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"invalid frozen supply: {entry}") from exc
    return frozen


def scale_total_supply(total: str | int, decimals: int) -> int:
    """Scale a total supply by the token precision."""
    if isinstance(total, bool):
        raise ValueError(f"invalid total supply {total!r}")
    if isinstance(total, str):
        total = _parse_int(total, _INT64_MIN, _INT64_MAX)
    return int(float(total) * float(10**decimals))


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return "" if value is None else str(value)


def _owner(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return str(Address(bytes(value)))
    return _text(value)


def _from_millis(ms: int) -> datetime:
    seconds = abs(ms) // 1000
    if ms < 0:
        seconds = -seconds
    return datetime.fromtimestamp(seconds, timezone.utc)


def _price(trx_num: int, num: int) -> float:
    if num == 0:
        if trx_num == 0:
            return math.nan
        return math.copysign(math.inf, trx_num)
    return trx_num / num


def asset_summary(asset: Mapping[str, Any]) -> dict[str, Any]:
    """Describe a TRC10 asset record.

    The record may hold ``id``, ``name``, ``abbr``, ``precision``,
    ``owner_address``, ``start_time``, ``end_time`` (milliseconds),
    ``total_supply``, ``url``, ``trx_num`` and ``num``.
    """
    return {
        "ID": _text(asset.get("id", "")),
        "Name": _text(asset.get("name", "")),
        "Symbol": _text(asset.get("abbr", "")),
        "Decimals": int(asset.get("precision", 0)),
        "Owner": _owner(asset.get("owner_address", b"")),
        "ICOStart": _from_millis(int(asset.get("start_time", 0))),
        "ICOEnd": _from_millis(int(asset.get("end_time", 0))),
        "TotalSupply": int(asset.get("total_supply", 0)),
        "URL": _text(asset.get("url", "")),
        "Price": _price(int(asset.get("trx_num", 0)), int(asset.get("num", 0))),
    }