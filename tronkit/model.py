"""Detailed account view and its JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any


class ResourceCode(IntEnum):
    """Resource types that frozen balance can grant."""

    BANDWIDTH = 0
    ENERGY = 1
    TRON_POWER = 2


@dataclass
class FrozenResource:
    """Balance frozen by an account, possibly delegated."""

    type: ResourceCode
    amount: int
    delegate_to: str = ""
    expire: int = 0

    def _as_json(self) -> dict[str, Any]:
        return {
            "Type": int(self.type),
            "Amount": self.amount,
            "DelegateTo": self.delegate_to,
            "Expire": self.expire,
        }


@dataclass
class UnfrozenResource:
    """Balance waiting to become withdrawable."""

    type: ResourceCode
    amount: int
    expire: int = 0

    def _as_json(self) -> dict[str, Any]:
        return {"Type": int(self.type), "Amount": self.amount, "Expire": self.expire}


def _key(name: str, **kwargs: Any) -> Any:
    return field(metadata={"json": name}, **kwargs)


@dataclass
class Account:
    """Everything known about an account, as shown by ``account info``."""

    address: str = _key("address", default="")
    type: str = _key("type", default="")
    name: str = _key("name", default="")
    id: str = _key("id", default="")
    balance: int = _key("balance", default=0)
    allowance: int = _key("allowance", default=0)
    last_withdraw: int = _key("lastWithdraw", default=0)
    is_witness: bool = _key("isWitness", default=False)
    is_elected: bool = _key("isElected", default=False)
    assets: dict[str, int] = _key("assetList", default_factory=dict)
    tron_power: int = _key("tronPower", default=0)
    tron_power_used: int = _key("tronPowerUsed", default=0)
    frozen_balance: int = _key("frozenBalance", default=0)
    frozen_resources: list[FrozenResource] = _key("frozenList", default_factory=list)
    frozen_balance_v2: int = _key("frozenBalanceV2", default=0)
    frozen_resources_v2: list[FrozenResource] = _key("frozenListV2", default_factory=list)
    unfrozen_resources: list[UnfrozenResource] = _key("unfrozenList", default_factory=list)
    votes: dict[str, int] = _key("voteList", default_factory=dict)
    bw_total: int = _key("bandwidthTotal", default=0)
    bw_used: int = _key("bandwidthUsed", default=0)
    energy_total: int = _key("energyTotal", default=0)
    energy_used: int = _key("energyUsed", default=0)
    rewards: int = _key("rewards", default=0)
    withdrawable_balance: int = _key("withdrawableBalance", default=0)
    unfreeze_left: int = _key("countUnfreezeLeft", default=0)
    max_can_delegate_bandwidth: int = _key("maxCanDelegateBandwidth", default=0)
    max_can_delegate_energy: int = _key("maxCanDelegateEnergy", default=0)

    def to_json(self) -> str:
        """Serialise to compact JSON with the documented key names."""
        payload = {f.metadata["json"]: _encode(getattr(self, f.name)) for f in fields(self)}
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _encode(value: Any) -> Any:
    if isinstance(value, (FrozenResource, UnfrozenResource)):
        return value._as_json()
    if isinstance(value, dict):
        return {key: _encode(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    return value