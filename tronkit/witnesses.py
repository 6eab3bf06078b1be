"""Super representative listings and brokerage settings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from .address import Address

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def validate_brokerage(text: str) -> int:
    """Parse a brokerage commission, which must lie between 0 and 100."""
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid brokerage {text!r}")
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"brokerage out of range: {text!r}")
    if value < 0 or value > 100:
        raise ValueError("invalid brokerage range 0 <= X <= 100")
    return value


def witness_productivity(produced: int, missed: int) -> float:
    """Percentage of scheduled blocks a witness actually produced."""
    total = produced + missed
    if total > 0:
        return produced / total * 100
    return 0.0


def _address_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return str(Address(bytes(value)))
    return str(value)


def summarize_witnesses(
    witnesses: Iterable[Mapping[str, Any]], elected_only: bool = False
) -> dict[str, Any]:
    """Summarise witness records, optionally keeping only elected ones.

    Each record may hold ``address`` (bytes or text), ``vote_count``,
    ``is_jobs``, ``total_produced``, ``total_missed`` and ``url``.
    """
    records = list(witnesses)
    rows = []
    for witness in records:
        elected = bool(witness.get("is_jobs", False))
        if elected_only and not elected:
            continue
        produced = int(witness.get("total_produced", 0))
        missed = int(witness.get("total_missed", 0))
        rows.append(
            {
                "address": _address_text(witness.get("address", b"")),
                "votes": int(witness.get("vote_count", 0)),
                "elected": elected,
                "blocksMissed": missed,
                "blocksProduced": produced,
                "productivity": witness_productivity(produced, missed),
                "url": witness.get("url", ""),
            }
        )
    return {"totalCount": len(records), "filterCount": len(rows), "witnesses": rows}