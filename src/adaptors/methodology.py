"""Default methodology text per protocol category."""

from typing import Dict, Optional

_DEX_METHODOLOGY = {
    "UserFees": "User pays a fee on each swap",
    "Fees": "Swap fees paid by users",
    "Revenue": "Share of swap fees kept by the protocol",
    "ProtocolRevenue": "Share of swap fees sent to the treasury",
    "HoldersRevenue": "Share of swap fees distributed to governance token holders",
    "SupplySideRevenue": "Swap fees distributed to liquidity providers",
}

_LENDING_METHODOLOGY = {
    "Fees": "Interest paid by borrowers",
    "UserFees": "Interest paid by borrowers",
    "Revenue": "Share of interest kept by the protocol (reserve factor)",
    "ProtocolRevenue": "Share of interest sent to the treasury",
    "HoldersRevenue": "Share of interest distributed to governance token holders",
    "SupplySideRevenue": "Interest paid to lenders",
}

METHODOLOGY_BY_CATEGORY: Dict[str, Dict[str, str]] = {
    "Dexes": _DEX_METHODOLOGY,
    "Derivatives": {
        "UserFees": "Trading fees and funding paid by traders",
        "Fees": "Trading fees paid by traders",
        "Revenue": "Share of trading fees kept by the protocol",
        "ProtocolRevenue": "Share of trading fees sent to the treasury",
        "HoldersRevenue": "Share of trading fees distributed to stakers",
        "SupplySideRevenue": "Trading fees and PnL paid to liquidity providers",
    },
    "Lending": _LENDING_METHODOLOGY,
    "CDP": {
        "Fees": "Stability fees and liquidation penalties paid by borrowers",
        "UserFees": "Stability fees paid by borrowers",
        "Revenue": "Stability fees and liquidation penalties kept by the protocol",
        "ProtocolRevenue": "Stability fees sent to the treasury",
        "HoldersRevenue": "Buybacks and burns of the governance token",
    },
    "Yield": {
        "Fees": "Yield generated by deposits",
        "UserFees": "Performance and management fees paid by depositors",
        "Revenue": "Performance and management fees kept by the protocol",
        "ProtocolRevenue": "Fees sent to the treasury",
        "SupplySideRevenue": "Yield paid to depositors",
    },
    "Liquid Staking": {
        "Fees": "Staking rewards earned by staked assets",
        "UserFees": "Share of staking rewards taken as a fee",
        "Revenue": "Share of staking rewards kept by the protocol",
        "ProtocolRevenue": "Share of staking rewards sent to the treasury",
        "SupplySideRevenue": "Staking rewards paid to stakers and node operators",
    },
    "Options": {
        "UserFees": "Premiums and fees paid by option buyers",
        "Fees": "Premiums and fees paid by option buyers",
        "Revenue": "Share of fees kept by the protocol",
        "SupplySideRevenue": "Premiums paid to option writers",
    },
    "Bridge": {
        "UserFees": "Fees paid by users to bridge assets",
        "Fees": "Bridge fees paid by users",
        "Revenue": "Share of bridge fees kept by the protocol",
        "SupplySideRevenue": "Bridge fees paid to liquidity providers and relayers",
    },
    "Chain": {
        "UserFees": "Gas fees paid by users",
        "Fees": "Gas fees paid by users",
        "Revenue": "Burned fees plus sequencer or validator revenue kept by the chain",
        "HoldersRevenue": "Fees burned",
        "SupplySideRevenue": "Fees paid to validators",
    },
}


def get_methodology_by_type(category: str) -> Optional[Dict[str, str]]:
    """Methodology fields for a category, or None for unknown categories."""
    methodology = METHODOLOGY_BY_CATEGORY.get(category)
    if methodology is None:
        return None
    return dict(methodology)
