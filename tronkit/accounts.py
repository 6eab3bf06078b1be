"""Amounts, votes and balance reports for account commands."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from .address import Address

SUN_PER_TRX = 1_000_000
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def to_sun(amount: str | int | float) -> int:
    """Convert a TRX amount to sun, truncating toward zero."""
    if isinstance(amount, bool):
        raise ValueError(f"invalid amount {amount!r}")
    if isinstance(amount, str):
        if not amount or amount != amount.strip() or "_" in amount:
            raise ValueError(f"invalid amount {amount!r}")
        try:
            value = float(amount)
        except ValueError as exc:
            raise ValueError(f"invalid amount {amount!r}") from exc
    elif isinstance(amount, (int, float)):
        value = float(amount)
    else:
        raise ValueError(f"invalid amount {amount!r}")
    scaled = value * 10**6
    if not math.isfinite(scaled):
        raise ValueError(f"amount {amount!r} is out of range")
    return int(scaled)


def _parse_int64(text: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_votes(entries: Iterable[str]) -> dict[str, int]:
    """Parse ``witness:count`` entries into a mapping of address to vote count."""
    votes: dict[str, int] = {}
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ValueError(f"invalid vote {parts}")
        key, count_text = parts
        if votes.get(key, 0) > 0:
            raise ValueError(f"vote collision {key}:{votes[key]} -> {entry}")
        try:
            witness = Address.from_base58(key)
        except ValueError as exc:
            raise ValueError(f"invalid address {key}. {exc}") from exc
        try:
            count = _parse_int64(count_text)
        except ValueError as exc:
            raise ValueError(f"invalid vote count {count_text}. {exc}") from exc
        votes[str(witness)] = count
    return votes


def balance_report(
    address: str, account_type: Any, balance: int, allowance: int, rewards: int
) -> dict[str, Any]:
    """Describe an account balance with amounts expressed in TRX."""
    return {
        "address": address,
        "type": account_type,
        "balance": balance / SUN_PER_TRX,
        "allowance": allowance / SUN_PER_TRX,
        "rewards": rewards / SUN_PER_TRX,
    }