"""Static id remap tables for known-bad catalog entries."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Legacy id -> corrected {id, name}
ID_MAP: Mapping[str, Optional[Dict[str, str]]] = MappingProxyType({
    "2196": {"id": "1", "name": "Uniswap"},
    "1599": {"id": "111", "name": "AAVE"},
})

# Adapter key -> the single legacy id it must match
_SPECIFIC_IDS: Mapping[str, str] = MappingProxyType({
    "uniswap": "2196",
    "aave": "1599",
    "mimo": "1241",
    "0x": "2116",
    "pact": "1468",
    "karura-swap": "451",
    "algofi": "2091",
    "penguin": "1575",
    "xdai": "1659",
    "stargate": "1571",
    "thena": "2417",
    "verse": "1732",
    "blur": "2414",
    "solidlydex": "2400",
    "tethys-finance": "1139",
    "ashswap": "2551",
})


def get_by_specific_id(key: str, id: str) -> bool:
    """True when ``key`` is pinned to a legacy id and ``id`` is that id."""
    expected = _SPECIFIC_IDS.get(key)
    if expected is None:
        return False
    return id == expected
