"""The zombie farm: creating, owning and feeding zombies."""

from __future__ import annotations

import random
import struct
from collections.abc import Hashable
from dataclasses import dataclass

_LEN = struct.Struct(">I")
_U64 = struct.Struct(">Q")
_U64_MASK = (1 << 64) - 1

DEFAULT_DNA_DIGITS = 16
FIRST_ZOMBIE_ID = 1
FEEDING_OFFSPRING_NAME = b"NoName"


class ContractError(Exception):
    """Raised when a contract call fails a requirement."""


def _as_bytes(name: bytes | str) -> bytes:
    return name.encode("utf-8") if isinstance(name, str) else bytes(name)


@dataclass(frozen=True)
class Zombie:
    """A zombie: a name and a DNA number."""

    name: bytes
    dna: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _as_bytes(self.name))
        if isinstance(self.dna, bool) or not isinstance(self.dna, int) or not 0 <= self.dna <= _U64_MASK:
            raise ValueError(f"dna must be an unsigned 64-bit integer, got {self.dna!r}")

    def encode(self) -> bytes:
        """Length-prefixed name followed by the DNA as eight big-endian bytes."""
        return _LEN.pack(len(self.name)) + self.name + _U64.pack(self.dna)

    @classmethod
    def decode(cls, data: bytes) -> Zombie:
        raw = bytes(data)
        if len(raw) < _LEN.size:
            raise ValueError("Zombie data too short for name length")
        (name_len,) = _LEN.unpack_from(raw)
        expected = _LEN.size + name_len + _U64.size
        if len(raw) != expected:
            raise ValueError(f"Zombie needs exactly {expected} bytes, got {len(raw)}")
        name = raw[_LEN.size:_LEN.size + name_len]
        (dna,) = _U64.unpack_from(raw, _LEN.size + name_len)
        return cls(name, dna)


@dataclass(frozen=True)
class NewZombieEvent:
    """Emitted whenever a zombie is created."""

    zombie_id: int
    name: bytes
    dna: int


class ZombiesContract:
    """Holds every zombie, who owns it, and the rules for making more."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.dna_digits = DEFAULT_DNA_DIGITS
        self.zombie_last_index = FIRST_ZOMBIE_ID
        self._zombies: dict[int, Zombie] = {}
        self._owners: dict[int, Hashable] = {}
        self._owned: dict[Hashable, set[int]] = {}
        self.events: list[NewZombieEvent] = []

    @property
    def _max_dna_value(self) -> int:
        return 10 ** self.dna_digits

    def create_zombie(self, owner: Hashable, name: bytes | str, dna: int) -> int:
        """Store a new zombie for ``owner`` and return its id."""
        zombie = Zombie(_as_bytes(name), dna)
        zombie_id = self.zombie_last_index
        self.events.append(NewZombieEvent(zombie_id, zombie.name, zombie.dna))
        self._zombies[zombie_id] = zombie
        self._owned.setdefault(owner, set()).add(zombie_id)
        self._owners[zombie_id] = owner
        self.zombie_last_index = zombie_id + 1
        return zombie_id

    def generate_random_dna(self) -> int:
        """A random DNA value with at most ``dna_digits`` decimal digits."""
        return self._rng.randrange(0, self._max_dna_value)

    def create_random_zombie(self, caller: Hashable, name: bytes | str) -> int:
        """Give ``caller`` their first zombie, with random DNA."""
        if self._owned.get(caller):
            raise ContractError("You already own a zombie")
        return self.create_zombie(caller, name, self.generate_random_dna())

    def feed_and_multiply(self, caller: Hashable, zombie_id: int, target_dna: int) -> int:
        """Feed a zombie on ``target_dna`` and create its offspring for ``caller``."""
        if zombie_id not in self._owners or self._owners[zombie_id] != caller:
            raise ContractError("Only the owner of the zombie can perform this operation")
        my_zombie = self.zombie(zombie_id)
        verified_target_dna = target_dna % self._max_dna_value
        new_dna = ((my_zombie.dna + verified_target_dna) & _U64_MASK) // 2
        return self.create_zombie(caller, FEEDING_OFFSPRING_NAME, new_dna)

    def zombie(self, zombie_id: int) -> Zombie:
        """The zombie stored under ``zombie_id``."""
        try:
            return self._zombies[zombie_id]
        except KeyError:
            raise ContractError(f"no zombie with id {zombie_id}") from None

    def zombie_owner(self, zombie_id: int) -> Hashable | None:
        """The owner of ``zombie_id``, or None if nobody owns it."""
        return self._owners.get(zombie_id)

    def owned_zombies(self, owner: Hashable) -> frozenset[int]:
        """The ids of every zombie ``owner`` holds."""
        return frozenset(self._owned.get(owner, ()))