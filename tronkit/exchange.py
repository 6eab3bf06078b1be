"""Amount handling for TRC10 Bancor exchange commands."""

from __future__ import annotations

import math

TRX_TOKEN_ID = "_"
TRX_DECIMALS = 6
_TRX_ALIASES = frozenset({"TRX", "0"})


def _parse_amount(value: str | int | float) -> float:
    if isinstance(value, bool):
        raise ValueError(f"invalid amount {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        if not value or value != value.strip() or "_" in value:
            raise ValueError(f"invalid amount {value!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise ValueError(f"invalid amount {value!r}") from exc
    raise ValueError(f"invalid amount {value!r}")


def normalize_token(
    token_id: str, amount: str | int | float, precision: int | None = None
) -> tuple[str, float]:
    """Return the exchange token id and the amount in its smallest unit.

    ``TRX`` and ``0`` stand for TRX, which the exchange calls ``_`` and which
    has six decimals. Any other token needs its ``precision``; without one the
    token is taken as unknown.
    """
    value = _parse_amount(amount)
    if token_id in _TRX_ALIASES or token_id == TRX_TOKEN_ID:
        return TRX_TOKEN_ID, value * 10.0**TRX_DECIMALS
    if precision is None:
        raise LookupError(f"TRC10 not found: {token_id}")
    return token_id, value * 10.0 ** int(precision)


def validate_token_pair(
    first_id: str,
    first_amount: str | int | float,
    second_id: str,
    second_amount: str | int | float,
) -> tuple[float, float]:
    """Check the two sides of a new exchange and return both amounts."""
    first = _parse_amount(first_amount)
    second = _parse_amount(second_amount)
    if first_id == second_id:
        raise ValueError("token ID cannot be the same")
    if first <= 0 or second <= 0:
        raise ValueError("invalid token amount")
    return first, second


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def expected_trade_amount(
    token_id: str,
    amount: float,
    first_token_id: str,
    first_balance: int,
    second_token_id: str,
    second_balance: int,
) -> int:
    """Estimate what a trade of ``amount`` of ``token_id`` returns.

    The estimate follows the pool balances after the deposit, rounded to the
    nearest whole unit.
    """
    if token_id == first_token_id:
        ratio = _ratio(float(first_balance) + amount, float(second_balance))
    elif token_id == second_token_id:
        ratio = _ratio(float(second_balance) + amount, float(first_balance))
    else:
        raise ValueError(
            f"Token ID provided does not match exchange {first_token_id}/{second_token_id}"
        )
    if ratio == 0:
        quotient = math.copysign(math.inf, amount) if amount else math.nan
    else:
        quotient = amount / ratio
    expected = math.floor(quotient + 0.5) if math.isfinite(quotient) else quotient
    if not math.isfinite(expected):
        raise ValueError("cannot compute expected amount")
    return int(expected)