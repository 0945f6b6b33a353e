# =============================================================================
# knowledge/addresses.py  —  Stacks Address Format Checker
# =============================================================================
#
# Checks that a string looks like a Stacks standard principal and that its
# version prefix matches the network the caller expects.  This is a format
# check only: no checksum decoding and no account lookup.
#
# PREFIXES (c32 version character after the leading "S"):
#   SP  mainnet, single-sig        ST  testnet, single-sig
#   SM  mainnet, multi-sig         SN  testnet, multi-sig
# =============================================================================

import re
from dataclasses import dataclass

NETWORKS = ("mainnet", "testnet", "devnet")

_ADDRESS_PATTERN = re.compile(r"^S[TPMNX][A-Z0-9]{36,41}$")

# Devnet (Clarinet) accounts use testnet addresses.
_PREFIX_NETWORKS = {
    "SP": "mainnet",
    "SM": "mainnet",
    "ST": "testnet",
    "SN": "testnet",
}

EXAMPLE_MAINNET = "SP1H1733V5MZ3SZ9XRW9FKYGEZT0JDGEB8Y634C7R"
EXAMPLE_TESTNET = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@dataclass(frozen=True)
class AddressCheck:
    address: str
    network: str                       # The network the caller expects
    valid_format: bool
    actual_network: str                # "mainnet", "testnet" or "unknown"

    @property
    def prefix(self) -> str:
        return self.address[:2]

    @property
    def network_match(self) -> bool:
        expected = "testnet" if self.network == "devnet" else self.network
        return self.valid_format and self.actual_network == expected


def check_stacks_address(address: str, network: str = "mainnet") -> AddressCheck:
    """Classify an address by format and network prefix.

    Raises:
        ValueError: if network is not one of NETWORKS.
    """
    if network not in NETWORKS:
        raise ValueError(f"Unknown network: {network!r} (expected one of {', '.join(NETWORKS)})")
    address = address.strip()
    valid = _ADDRESS_PATTERN.match(address) is not None
    actual = _PREFIX_NETWORKS.get(address[:2], "unknown") if valid else "unknown"
    return AddressCheck(address=address, network=network, valid_format=valid, actual_network=actual)


def _yes_no(flag: bool) -> str:
    return "✅ Yes" if flag else "❌ No"


def validate_stacks_address(address: str, network: str = "mainnet") -> str:
    """The validate_stacks_address answer as a markdown report."""
    check = check_stacks_address(address, network)

    if not check.valid_format:
        return f"""# Address Validation Result

**Address**: {check.address}
**Valid Format**: ❌ No
**Network**: {check.network}

## Issues Detected
- Address does not match Stacks address format
- Expected format: S[TPMNX][A-Z0-9]{{36-41}}

## Valid Examples
- **Mainnet**: {EXAMPLE_MAINNET}
- **Testnet**: {EXAMPLE_TESTNET}

## Next Steps
- Check address spelling and format
- Ensure you're using the correct network prefix (SP for mainnet, ST for testnet)"""

    lines = [
        "# Address Validation Result",
        "",
        f"**Address**: {check.address}",
        f"**Valid Format**: {_yes_no(True)}",
        f"**Expected Network**: {check.network}",
        f"**Actual Network**: {check.actual_network}",
        f"**Network Match**: {_yes_no(check.network_match)}",
        "",
        "## Address Details",
        f"- **Prefix**: {check.prefix}",
        f"- **Length**: {len(check.address)} characters",
        "- **Format**: Correct Stacks address format",
    ]
    if not check.network_match:
        lines += [
            "",
            f"⚠️ **Network Mismatch**: Address is for {check.actual_network} "
            f"but you specified {check.network}",
        ]
    lines += [
        "",
        "## Supported Networks",
        "- **Mainnet**: Addresses start with 'SP' (or 'SM' for multi-sig)",
        "- **Testnet / Devnet**: Addresses start with 'ST' (or 'SN' for multi-sig)",
    ]
    return "\n".join(lines)
