import math
from datetime import datetime, timedelta, timezone

import pytest

from tronkit.address import Address
from tronkit.tokens import (
    asset_summary,
    parse_frozen_supply,
    parse_ratio,
    parse_start_date,
    scale_total_supply,
    validate_decimals,
)

OWNER = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
NOW = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("decimals", [0, 3, 6])
def test_validate_decimals_accepts_range(decimals):
    assert validate_decimals(decimals) == decimals


@pytest.mark.parametrize("decimals", [-1, 7])
def test_validate_decimals_rejects_out_of_range(decimals):
    with pytest.raises(ValueError, match="decimals should be"):
        validate_decimals(decimals)


def test_parse_start_date_future():
    start = parse_start_date("2031-05-06T07:08:09Z", NOW)
    assert start == datetime(2031, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


def test_parse_start_date_naive_is_utc():
    start = parse_start_date("2031-05-06 07:08:09", NOW)
    assert start.tzinfo is not None
    assert start.utcoffset() == timedelta(0)
    assert start.hour == 7


def test_parse_start_date_past_rejected():
    with pytest.raises(ValueError, match="start date cannot be prior issue"):
        parse_start_date("2020-01-01", NOW)


def test_parse_start_date_garbage_rejected():
    with pytest.raises(ValueError):
        parse_start_date("not a date", NOW)


def test_parse_ratio_with_colon():
    assert parse_ratio("1:2") == (1, 2)


def test_parse_ratio_integer():
    assert parse_ratio("2") == (2, 1)


@pytest.mark.parametrize("text", ["1.5", "0.25", "3.125"])
def test_parse_ratio_decimal_keeps_value(text):
    trx_num, token_num = parse_ratio(text)
    assert trx_num / token_num == pytest.approx(float(text))
    assert token_num >= 1


@pytest.mark.parametrize("text", ["abc", "1:x", "x:1", "1:2:3", "3000000000:1", ""])
def test_parse_ratio_invalid(text):
    with pytest.raises(ValueError):
        parse_ratio(text)


def test_parse_frozen_supply_scales_amount():
    assert parse_frozen_supply(["1:100"], 0) == {"1": "100"}
    assert parse_frozen_supply(["1:100", "2:5"], 2) == {"1": "10000", "2": "500"}


def test_parse_frozen_supply_collision():
    with pytest.raises(ValueError, match="collision"):
        parse_frozen_supply(["1:100", "1:200"], 0)


def test_parse_frozen_supply_bad_format():
    with pytest.raises(ValueError, match="invalid frozen supply"):
        parse_frozen_supply(["1-100"], 0)


def test_parse_frozen_supply_bad_amount():
    with pytest.raises(ValueError, match="invalid frozen supply: 1:abc"):
        parse_frozen_supply(["1:abc"], 0)


def test_scale_total_supply():
    assert scale_total_supply("1000", 0) == 1000
    assert scale_total_supply(1000, 3) == 1000 * 10**3
    assert scale_total_supply("7", 6) == 7 * 10**6


@pytest.mark.parametrize("text", ["ten", "1.5", "99999999999999999999"])
def test_scale_total_supply_invalid(text):
    with pytest.raises(ValueError):
        scale_total_supply(text, 0)


def test_asset_summary_fields():
    owner = Address.from_base58(OWNER)
    start_ms = 1_900_000_000_123
    end_ms = 1_900_086_400_999
    summary = asset_summary(
        {
            "id": "1000001",
            "name": b"Token",
            "abbr": b"TKN",
            "precision": 6,
            "owner_address": bytes(owner),
            "start_time": start_ms,
            "end_time": end_ms,
            "total_supply": 500,
            "url": b"https://example.com",
            "trx_num": 1,
            "num": 4,
        }
    )
    assert summary["ID"] == "1000001"
    assert summary["Name"] == "Token"
    assert summary["Symbol"] == "TKN"
    assert summary["Decimals"] == 6
    assert summary["Owner"] == OWNER
    assert summary["ICOStart"] == datetime.fromtimestamp(start_ms // 1000, timezone.utc)
    assert summary["ICOEnd"] == datetime.fromtimestamp(end_ms // 1000, timezone.utc)
    assert summary["TotalSupply"] == 500
    assert summary["URL"] == "https://example.com"
    assert summary["Price"] == pytest.approx(1 / 4)


def test_asset_summary_zero_num_price():
    summary = asset_summary({"trx_num": 1, "num": 0})
    assert math.isinf(summary["Price"])
    assert summary["Owner"] == ""