"""Tests for the Stacks address format checker."""

import pytest

from knowledge.addresses import (
    EXAMPLE_MAINNET,
    EXAMPLE_TESTNET,
    check_stacks_address,
    validate_stacks_address,
)


@pytest.mark.parametrize(
    "address, network",
    [(EXAMPLE_MAINNET, "mainnet"), (EXAMPLE_TESTNET, "testnet"), (EXAMPLE_TESTNET, "devnet")],
)
def test_address_matches_its_network(address, network):
    check = check_stacks_address(address, network)
    assert check.valid_format
    assert check.network_match


def test_surrounding_whitespace_is_ignored():
    check = check_stacks_address(f"  {EXAMPLE_MAINNET}\n")
    assert check.address == EXAMPLE_MAINNET
    assert check.actual_network == "mainnet"


def test_multisig_prefixes_map_to_networks():
    body = EXAMPLE_MAINNET[2:]
    assert check_stacks_address("SM" + body).actual_network == "mainnet"
    assert check_stacks_address("SN" + body, "testnet").network_match


def test_valid_format_with_unknown_prefix_never_matches():
    check = check_stacks_address("SX" + EXAMPLE_MAINNET[2:])
    assert check.valid_format
    assert check.actual_network == "unknown"
    assert not check.network_match


@pytest.mark.parametrize(
    "address",
    ["", "SP123", "sp1h1733v5mz3sz9xrw9fkygezt0jdgeb8y634c7r", "0x52908400098527886E0F7030069857D2E4169EE7", "SA" + EXAMPLE_MAINNET[2:]],
)
def test_malformed_addresses(address):
    check = check_stacks_address(address)
    assert not check.valid_format
    assert not check.network_match


def test_unknown_network_raises():
    with pytest.raises(ValueError):
        check_stacks_address(EXAMPLE_MAINNET, "regtest")


def test_report_for_matching_address():
    text = validate_stacks_address(EXAMPLE_MAINNET)
    assert text.startswith("# Address Validation Result\n\n")
    assert "**Valid Format**: ✅ Yes" in text
    assert "**Actual Network**: mainnet" in text
    assert "**Network Match**: ✅ Yes" in text
    assert "- **Length**: 41 characters" in text
    assert "Network Mismatch" not in text


def test_report_for_network_mismatch():
    text = validate_stacks_address(EXAMPLE_TESTNET, "mainnet")
    assert "**Network Match**: ❌ No" in text
    assert "⚠️ **Network Mismatch**: Address is for testnet but you specified mainnet" in text


def test_report_for_malformed_address():
    text = validate_stacks_address("not-an-address")
    assert "**Valid Format**: ❌ No" in text
    assert "Expected format: S[TPMNX][A-Z0-9]{36-41}" in text
    assert EXAMPLE_TESTNET in text
