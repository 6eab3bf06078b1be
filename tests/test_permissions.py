import pytest

from tronkit.permissions import (
    CONTRACT_TYPES,
    EXCLUDED_OPERATIONS,
    parse_permission_keys,
    parse_permissions,
)


def test_keys_parsed_with_weights():
    assert parse_permission_keys("KeyA-1+KeyB-2") == {"KeyA": 1, "KeyB": 2}


def test_keys_later_duplicate_wins():
    assert parse_permission_keys("KeyA-1+KeyA-5") == {"KeyA": 5}


@pytest.mark.parametrize("text", ["", "KeyA", "KeyA-x", "KeyA-1-2", "KeyA-1+"])
def test_invalid_keys_rejected(text):
    with pytest.raises(ValueError, match="invalid key"):
        parse_permission_keys(text)


def test_key_weight_out_of_int64_range_rejected():
    with pytest.raises(ValueError, match="invalid key"):
        parse_permission_keys("KeyA-9223372036854775808")


def test_empty_rules_rejected():
    with pytest.raises(ValueError, match="at least one rule is expected"):
        parse_permissions([])


def test_owner_and_witness_parsed():
    owner, witness, actives = parse_permissions(["O:2:KeyA-1+KeyB-1", "w:1:KeyC-1"])
    assert owner == {"name": "owner", "threshold": 2, "keys": {"KeyA": 1, "KeyB": 1}}
    assert witness == {"name": "witness", "threshold": 1, "keys": {"KeyC": 1}}
    assert actives == []


def test_only_one_owner_allowed():
    with pytest.raises(ValueError, match="only one owner"):
        parse_permissions(["O:1:KeyA-1", "o:1:KeyB-1"])


def test_only_one_witness_allowed():
    with pytest.raises(ValueError, match="only one witness"):
        parse_permissions(["W:1:KeyA-1", "W:1:KeyB-1"])


def test_actives_filter_excluded_operations():
    ops = ["TransferContract", "UpdateBrokerageContract", "ShieldedTransferContract"]
    owner, witness, actives = parse_permissions(["A:3:KeyA-2+KeyB-1"], ops)
    assert owner is None and witness is None
    assert len(actives) == 1
    active = actives[0]
    assert active["threshold"] == 3
    assert active["keys"] == {"KeyA": 2, "KeyB": 1}
    assert active["operations"] == {"TransferContract": True}


def test_several_actives_share_the_name():
    _, _, actives = parse_permissions(["A:1:KeyA-1", "a:2:KeyB-1"], ["TransferContract"])
    assert [a["threshold"] for a in actives] == [1, 2]
    assert {a["name"] for a in actives} == {"active0"}


def test_default_operations_cover_known_types_minus_excluded():
    _, _, actives = parse_permissions(["A:1:KeyA-1"])
    ops = actives[0]["operations"]
    assert set(ops) == set(CONTRACT_TYPES) - EXCLUDED_OPERATIONS
    assert all(value is True for value in ops.values())


@pytest.mark.parametrize("rule", ["O:1", "O:1:KeyA-1:extra", "nothing"])
def test_invalid_format_rejected(rule):
    with pytest.raises(ValueError, match="invalid format"):
        parse_permissions([rule])


def test_invalid_type_rejected():
    with pytest.raises(ValueError, match="invalid type: X"):
        parse_permissions(["X:1:KeyA-1"])


@pytest.mark.parametrize("rule", ["O:abc:KeyA-1", "W:1.5:KeyA-1", "A::KeyA-1"])
def test_invalid_threshold_rejected(rule):
    with pytest.raises(ValueError, match="invalid threshold"):
        parse_permissions([rule])


def test_invalid_key_in_rule_rejected():
    with pytest.raises(ValueError, match="invalid key: KeyA"):
        parse_permissions(["O:1:KeyA"])