from tronkit.cli import main

BASE58 = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"
HEX = "0x41364b03e0815687edaf90b81ff58e496dea7383d7"


def test_base58_to_addr(capsys):
    assert main(["utility", "base58-to-addr", BASE58]) == 0
    assert capsys.readouterr().out.strip() == HEX


def test_addr_to_base58(capsys):
    assert main(["utility", "addr-to-base58", HEX]) == 0
    assert capsys.readouterr().out.strip() == BASE58


def test_round_trip_other_address(capsys):
    address = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
    main(["utility", "base58-to-addr", address])
    hex_text = capsys.readouterr().out.strip()
    main(["utility", "addr-to-base58", hex_text])
    assert capsys.readouterr().out.strip() == address


def test_invalid_base58_fails(capsys):
    assert main(["utility", "base58-to-addr", "notanaddress"]) == 1
    assert "Error" in capsys.readouterr().err


def test_invalid_hex_prints_empty_line(capsys):
    assert main(["utility", "addr-to-base58", "zz"]) == 0
    assert capsys.readouterr().out == "\n"


def test_version_goes_to_stderr(capsys):
    assert main(["version"]) == 0
    captured = capsys.readouterr()
    assert captured.err.startswith("TronCTL. ")
    assert captured.out == ""


def test_metadata_prints_nothing(capsys):
    assert main(["utility", "metadata"]) == 0
    assert capsys.readouterr().out == ""


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "utility" in capsys.readouterr().out


def test_utility_without_subcommand_prints_help(capsys):
    assert main(["utility"]) == 0
    assert "base58-to-addr" in capsys.readouterr().out


def test_missing_argument_is_usage_error(capsys):
    assert main(["utility", "base58-to-addr"]) == 2
    assert "usage" in capsys.readouterr().err