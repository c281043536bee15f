"""
Key and door alphabets for dungeon grids.

Keys 'a'-'f' unlock doors 'A'-'F'; the identity of a key or door is its
offset in its alphabet, so key identity k always opens door identity k.

'E' is the exit marker, so door identity 4 can never appear in a grid:
``door_identity("E")`` is None, ``door_symbol(4)`` raises, and key 'e'
is collectible but opens nothing.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

MAX_KEYS = 6
KEY_SYMBOLS = "abcdef"
DOOR_SYMBOLS = "ABCDEF"
EXIT_MARKER = "E"

# Identities whose door symbol does not collide with the exit marker
DOOR_IDENTITIES = tuple(
    identity for identity, symbol in enumerate(DOOR_SYMBOLS) if symbol != EXIT_MARKER
)


def key_identity(symbol: str) -> Optional[int]:
    """Return the key identity of a symbol, or None if it is not a key."""
    if len(symbol) != 1:
        return None
    index = KEY_SYMBOLS.find(symbol)
    return index if index >= 0 else None


def door_identity(symbol: str) -> Optional[int]:
    """Return the door identity of a symbol, or None if it is not a door."""
    if len(symbol) != 1 or symbol == EXIT_MARKER:
        return None
    index = DOOR_SYMBOLS.find(symbol)
    return index if index >= 0 else None


def is_door(symbol: str) -> bool:
    return door_identity(symbol) is not None


def key_symbol(identity: int) -> str:
    _check_identity(identity)
    return KEY_SYMBOLS[identity]


def door_symbol(identity: int) -> str:
    _check_identity(identity)
    if identity not in DOOR_IDENTITIES:
        raise ValueError(
            f"door identity {identity} shares {EXIT_MARKER!r} with the exit marker"
        )
    return DOOR_SYMBOLS[identity]


def _check_identity(identity: int) -> None:
    if not 0 <= identity < MAX_KEYS:
        raise ValueError(f"identity must be between 0 and {MAX_KEYS - 1}, got {identity}")


@dataclass(frozen=True)
class KeySet:
    """Immutable set of collected key identities stored as a bitmask.

    Bit k is set once key k has been picked up. Adding a key returns a new
    KeySet; flags are never cleared.
    """

    mask: int = 0

    def __post_init__(self):
        if not 0 <= self.mask < (1 << MAX_KEYS):
            raise ValueError(
                f"mask must be between 0 and {(1 << MAX_KEYS) - 1}, got {self.mask}"
            )

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "KeySet":
        """Build a key set from key symbols, e.g. ``KeySet.from_symbols("ac")``."""
        mask = 0
        for symbol in symbols:
            identity = key_identity(symbol)
            if identity is None:
                raise ValueError(f"{symbol!r} is not a key symbol")
            mask |= 1 << identity
        return cls(mask)

    def has(self, identity: int) -> bool:
        _check_identity(identity)
        return bool((self.mask >> identity) & 1)

    def __contains__(self, identity: int) -> bool:
        return self.has(identity)

    def with_key(self, identity: int) -> "KeySet":
        _check_identity(identity)
        return KeySet(self.mask | (1 << identity))

    def collect(self, symbol: str) -> "KeySet":
        """Return the key set after stepping onto a cell holding ``symbol``."""
        identity = key_identity(symbol)
        if identity is None:
            return self
        return self.with_key(identity)

    def can_open(self, symbol: str) -> bool:
        """True unless ``symbol`` is a door whose key has not been collected."""
        identity = door_identity(symbol)
        if identity is None:
            return True
        return self.has(identity)

    def __iter__(self) -> Iterator[int]:
        return (i for i in range(MAX_KEYS) if (self.mask >> i) & 1)

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def symbols(self) -> str:
        return "".join(KEY_SYMBOLS[i] for i in self)

    def __str__(self) -> str:
        return "{" + ",".join(self.symbols()) + "}"
