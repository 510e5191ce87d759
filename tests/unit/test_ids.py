"""Unit tests for the static id tables."""

import pytest

from src.adaptors.ids import ID_MAP, get_by_specific_id


class TestGetBySpecificId:
    """Tests for get_by_specific_id."""

    def test_matching_id(self):
        assert get_by_specific_id("uniswap", "2196") is True

    def test_wrong_id(self):
        assert get_by_specific_id("uniswap", "9999") is False

    def test_unknown_key(self):
        assert get_by_specific_id("unknown-key", "anything") is False

    @pytest.mark.parametrize(
        "key,id",
        [
            ("aave", "1599"),
            ("0x", "2116"),
            ("karura-swap", "451"),
            ("tethys-finance", "1139"),
            ("ashswap", "2551"),
        ],
    )
    def test_pinned_keys(self, key, id):
        assert get_by_specific_id(key, id) is True

    def test_id_of_another_key_does_not_match(self):
        assert get_by_specific_id("aave", "2196") is False


class TestIdMap:
    """Tests for ID_MAP."""

    def test_known_entries(self):
        assert ID_MAP["2196"] == {"id": "1", "name": "Uniswap"}
        assert ID_MAP["1599"] == {"id": "111", "name": "AAVE"}

    def test_unknown_entry(self):
        assert ID_MAP.get("1") is None
