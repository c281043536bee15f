import pytest

from dungeon_pathfinder.dungeon.keys import (
    DOOR_IDENTITIES,
    KeySet,
    door_identity,
    door_symbol,
    is_door,
    key_identity,
    key_symbol,
)


class TestSymbols:
    def test_key_identity(self):
        assert key_identity("a") == 0
        assert key_identity("f") == 5
        assert key_identity("g") is None
        assert key_identity("A") is None
        assert key_identity("") is None
        assert key_identity("ab") is None

    def test_door_identity(self):
        assert door_identity("A") == 0
        assert door_identity("C") == 2
        assert door_identity("F") == 5
        assert door_identity("G") is None
        assert door_identity("c") is None
        assert door_identity("S") is None
        assert door_identity("E") is None

    def test_pairing(self):
        assert DOOR_IDENTITIES == (0, 1, 2, 3, 5)
        for identity in DOOR_IDENTITIES:
            assert key_identity(key_symbol(identity)) == door_identity(door_symbol(identity))

    def test_exit_marker_is_not_a_door(self):
        """'E' is the exit, so door identity 4 has no symbol."""
        assert door_identity("E") is None
        assert not is_door("E")
        with pytest.raises(ValueError):
            door_symbol(4)
        assert key_symbol(4) == "e"

    def test_predicates(self):
        assert is_door("B")
        assert is_door("F")
        assert not is_door("b")
        assert not is_door("#")

    def test_invalid_identity(self):
        with pytest.raises(ValueError):
            key_symbol(6)
        with pytest.raises(ValueError):
            door_symbol(-1)


class TestKeySet:
    def test_empty(self):
        keys = KeySet()
        assert len(keys) == 0
        assert list(keys) == []
        assert not keys.has(0)

    def test_with_key_returns_new_set(self):
        keys = KeySet()
        more = keys.with_key(2)
        assert 2 in more
        assert 2 not in keys
        assert more.mask == 0b100

    def test_collect(self):
        keys = KeySet().collect("b").collect("e")
        assert keys.symbols() == "be"
        assert len(keys) == 2
        unchanged = KeySet(1)
        assert unchanged.collect(" ") is unchanged
        assert unchanged.collect("A") is unchanged

    def test_collect_is_idempotent(self):
        keys = KeySet.from_symbols("a")
        assert keys.collect("a") == keys

    def test_can_open(self):
        keys = KeySet.from_symbols("c")
        assert keys.can_open("C")
        assert not keys.can_open("A")
        assert keys.can_open(" ")
        assert keys.can_open("a")
        assert keys.can_open("E")

    def test_key_e_opens_nothing(self):
        keys = KeySet().collect("e")
        assert keys.symbols() == "e"
        assert not keys.can_open("A")

    def test_from_symbols(self):
        keys = KeySet.from_symbols("ca")
        assert keys.symbols() == "ac"
        assert list(keys) == [0, 2]
        assert str(keys) == "{a,c}"

    def test_from_symbols_rejects_non_keys(self):
        with pytest.raises(ValueError):
            KeySet.from_symbols("aB")

    def test_equality_and_hash(self):
        assert KeySet.from_symbols("ab") == KeySet(0b11)
        assert len({KeySet(3), KeySet.from_symbols("ba")}) == 1

    def test_mask_range(self):
        assert len(KeySet(63)) == 6
        with pytest.raises(ValueError):
            KeySet(64)
        with pytest.raises(ValueError):
            KeySet(-1)

    def test_invalid_identity(self):
        with pytest.raises(ValueError):
            KeySet().has(6)
        with pytest.raises(ValueError):
            KeySet().with_key(-1)
