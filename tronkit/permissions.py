"""Parsing of account permission rules given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Contract types that an active permission never grants.
EXCLUDED_OPERATIONS = frozenset({"UpdateBrokerageContract", "ShieldedTransferContract"})

CONTRACT_TYPES = (
    "AccountCreateContract",
    "TransferContract",
    "TransferAssetContract",
    "VoteWitnessContract",
    "WitnessCreateContract",
    "AssetIssueContract",
    "WitnessUpdateContract",
    "ParticipateAssetIssueContract",
    "AccountUpdateContract",
    "FreezeBalanceContract",
    "UnfreezeBalanceContract",
    "WithdrawBalanceContract",
    "UnfreezeAssetContract",
    "UpdateAssetContract",
    "ProposalCreateContract",
    "ProposalApproveContract",
    "ProposalDeleteContract",
    "SetAccountIdContract",
    "CustomContract",
    "CreateSmartContract",
    "TriggerSmartContract",
    "GetContract",
    "UpdateSettingContract",
    "ExchangeCreateContract",
    "ExchangeInjectContract",
    "ExchangeWithdrawContract",
    "ExchangeTransactionContract",
    "UpdateEnergyLimitContract",
    "AccountPermissionUpdateContract",
    "ClearABIContract",
    "UpdateBrokerageContract",
    "ShieldedTransferContract",
    "MarketSellAssetContract",
    "MarketCancelOrderContract",
    "FreezeBalanceV2Contract",
    "UnfreezeBalanceV2Contract",
    "WithdrawExpireUnfreezeContract",
    "DelegateResourceContract",
    "UnDelegateResourceContract",
)


def _parse_int64(text: str) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_permission_keys(text: str) -> dict[str, int]:
    """Parse ``ADDRESS1-WEIGHT+ADDRESS2-WEIGHT`` into a mapping of key to weight."""
    keys: dict[str, int] = {}
    for item in text.split("+"):
        parts = item.split("-")
        if len(parts) != 2:
            raise ValueError(f"invalid key: {item}")
        name, weight_text = parts
        try:
            keys[name] = _parse_int64(weight_text)
        except ValueError as exc:
            raise ValueError(f"invalid key: {item}") from exc
    return keys


def _threshold(text: str) -> int:
    try:
        return _parse_int64(text)
    except ValueError as exc:
        raise ValueError(f"invalid threshold: {text}") from exc


def parse_permissions(
    entries: Iterable[str], operations: Iterable[str] | None = None
) -> tuple[dict[str, Any] | None, dict[str, Any] | None, list[dict[str, Any]]]:
    """Parse ``TYPE:THRESHOLD:KEYS`` rules into owner, witness and active permissions.

    ``TYPE`` is ``O`` (owner), ``W`` (witness) or ``A`` (active), in either case.
    Active permissions allow every operation in ``operations`` (by default all
    known contract types) except the excluded ones.
    """
    rules = list(entries)
    if not rules:
        raise ValueError("at least one rule is expected")

    names = CONTRACT_TYPES if operations is None else tuple(operations)
    allowed = {name: True for name in names if name not in EXCLUDED_OPERATIONS}

    owner: dict[str, Any] | None = None
    witness: dict[str, Any] | None = None
    actives: list[dict[str, Any]] = []
    active_counter = 0

    for rule in rules:
        parts = rule.split(":")
        if len(parts) != 3:
            raise ValueError(f"invalid format: {rule}")
        kind, threshold_text, keys_text = parts
        if kind in ("O", "o"):
            if owner is not None:
                raise ValueError("can have only one owner permission")
            owner = {
                "name": "owner",
                "threshold": _threshold(threshold_text),
                "keys": parse_permission_keys(keys_text),
            }
        elif kind in ("W", "w"):
            if witness is not None:
                raise ValueError("can have only one witness permission")
            witness = {
                "name": "witness",
                "threshold": _threshold(threshold_text),
                "keys": parse_permission_keys(keys_text),
            }
        elif kind in ("A", "a"):
            threshold = _threshold(threshold_text)
            keys = parse_permission_keys(keys_text)
            actives.append(
                {
                    "name": f"active{active_counter}",
                    "threshold": threshold,
                    "keys": keys,
                    "operations": dict(allowed),
                }
            )
        else:
            raise ValueError(f"invalid type: {kind}")

    return owner, witness, actives