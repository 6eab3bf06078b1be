# tronkit

Helpers for preparing TRON wallet operations in Python:

- `tronkit.address`: Base58Check encoding, the `Address` type (hex, Base58,
  Base64 and integer forms) and deriving an address from a secp256k1 public key.
- `tronkit.abi`: Solidity ABI encoding of call parameters and method selectors.
- `tronkit.accounts`, `tronkit.permissions`, `tronkit.witnesses`,
  `tronkit.tokens`, `tronkit.exchange`: parsing and checking the values a
  wallet collects before building a transaction.
- `tronkit.contracts`: readable views of contract fields and maintenance times.
- `tronkit.model`: the detailed `Account` record and its JSON form.
- `tronkit.config`: a YAML settings file.
- `tronkit.cli`: the `tronkit` command.

## Installation

```
pip install tronkit
```

With the test requirements:

```
pip install "tronkit[test]"
pytest
```

## Addresses

```python
from tronkit.address import Address, parse_tron_address

addr = Address.from_base58("TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1")
print(addr.to_hex())   # 0x-prefixed hex of the 21 bytes
print(str(addr))       # Base58Check again
```

`Address.from_base58` raises `ValueError` on a bad checksum, a length other
than 21 bytes or a first byte other than `0x41`. `Address.scan` accepts only
`bytes` of exactly 21 bytes (`TypeError` otherwise for the type, `ValueError`
for the length). `Address.from_public_key` takes a 33-, 64- or 65-byte
secp256k1 key. `encode_check`, `decode_check` and `keccak256` are available on
their own.

## ABI encoding

Parameters are a list of single-entry mappings from a Solidity type to a value.
Integers may be numbers or strings (decimal, and for types wider than 64 bits
also `0x` hex); addresses are Base58; bytes are hex or Base64 strings.

```python
from tronkit.abi import get_padded_param, load_from_json, pack

encoded = get_padded_param([
    {"string": "Example Token"},
    {"uint8": "6"},
    {"uint256": "0xABCD"},
])

params = load_from_json('[{"address": "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"}, {"uint256": "100"}]')
call_data = pack("transfer(address,uint256)", params)
```

`signature` returns the four-byte selector that `pack` puts in front.
`get_parser` and `get_inputs_parser` return a method's output or input
`Argument`s from an ABI given as a mapping with `entrys` (or `entries`) or as a
list of entries, raising `LookupError` when the method is absent.

## Wallet inputs

- `accounts.to_sun("1.5")` gives `1500000`; `parse_votes(["T...:10"])` checks
  each witness address and count; `balance_report` expresses amounts in TRX.
- `permissions.parse_permissions(["o:2:KEY1-1+KEY2-1", "a:1:KEY1-1"])` returns
  the owner, witness and list of active permissions.
- `witnesses.validate_brokerage` accepts 0 to 100; `summarize_witnesses`
  builds the listing with productivity percentages.
- `tokens.parse_ratio("0.5")` gives `(5, 10)`; also `validate_decimals`,
  `parse_start_date`, `parse_frozen_supply`, `scale_total_supply` and
  `asset_summary`.
- `exchange.normalize_token`, `validate_token_pair` and
  `expected_trade_amount` handle Bancor exchange amounts; `TRX` and `0` map to
  the token id `_` with six decimals.

Invalid input raises `ValueError` (or `LookupError` where a token is unknown).

## Configuration

```python
from tronkit.config import init_config, save_config

config = init_config("/tmp/tronkit-config")
config.set("node", "localhost")   # stored as "localhost:50051"
print(config.get("node"))
```

`init_config` uses `~/.config/tronctl` when no directory is given and writes
defaults to `config.default` when the file is missing or has no node. `set`
and `get` know `node`, `ledger`, `verbose`, `nopretty`, `apiKey` and
`withTLS`; `get("all")` returns every setting. Unknown names raise `KeyError`.
`load_config` and `save_config` read and write the file directly.

## Command line

```
tronkit version
tronkit utility base58-to-addr TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1
tronkit utility addr-to-base58 0x41b3dcf27c251da9363f1a4888257c16676cf54edf
```

`utility metadata` and `utility metrics` exist but print nothing.

## What it does not do

tronkit does not talk to a node: it cannot query balances, build, sign or
broadcast transactions, and it keeps no keystore of private keys. The command
line offers only the version and address conversion commands above.