"""Human-readable views of transaction contracts and chain timing."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from .address import Address

ADDRESS_FIELDS = frozenset({"OwnerAddress", "ReceiverAddress", "ToAddress", "ContractAddress"})


def _address_text(value: Any) -> str:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"address field must be bytes, not {type(value).__name__}")
    return str(Address(bytes(value)))


def parse_contract_human_readable(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return contract fields with addresses in Base58 and votes as a mapping.

    Internal ``XXX_`` fields are dropped.
    """
    result: dict[str, Any] = {}
    for name, value in fields.items():
        if name.startswith("XXX_"):
            continue
        if name in ADDRESS_FIELDS:
            value = _address_text(value)
        result[name] = value
    if "Votes" in result:
        result["Votes"] = {
            _address_text(vote["VoteAddress"]): int(vote["VoteCount"])
            for vote in result["Votes"]
        }
    return result


def maintenance_report(timestamp_ms: int) -> dict[str, Any]:
    """Describe the next maintenance time given in milliseconds."""
    seconds = abs(timestamp_ms) // 1000
    if timestamp_ms < 0:
        seconds = -seconds
    date = datetime.fromtimestamp(seconds, timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return {"nextTimestamp": timestamp_ms, "date": date}