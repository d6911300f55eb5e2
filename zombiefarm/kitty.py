"""Kitty records: colours, genes and their fixed-width big-endian encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

_U64_MASK = (1 << 64) - 1


def _check_unsigned(name: str, value: int, bits: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value!r}")


def _check_length(kind: str, data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{kind} needs exactly {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class Color:
    """An RGB colour with one byte per channel."""

    r: int
    g: int
    b: int

    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">BBB")

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_unsigned(name, getattr(self, name), 8)

    def as_u64(self) -> int:
        """Pack the colour into 24 bits; the red channel fills all three bytes."""
        return (((self.r << 8) | self.r) << 8) | self.r

    def encode(self) -> bytes:
        return self._FORMAT.pack(self.r, self.g, self.b)

    @classmethod
    def decode(cls, data: bytes) -> Color:
        raw = _check_length("Color", data, cls._FORMAT.size)
        return cls(*cls._FORMAT.unpack(raw))


@dataclass(frozen=True)
class KittyGenes:
    """The inherited traits of a kitty."""

    fur_color: Color
    eye_color: Color
    meow_power: int

    SIZE: ClassVar[int] = 7

    def __post_init__(self) -> None:
        _check_unsigned("meow_power", self.meow_power, 8)

    def as_u64(self) -> int:
        """Pack fur colour, eye colour and meow power into one integer."""
        packed = ((self.fur_color.as_u64() << 24) | self.eye_color.as_u64()) << 8
        return (packed | self.meow_power) & _U64_MASK

    def encode(self) -> bytes:
        return self.fur_color.encode() + self.eye_color.encode() + bytes([self.meow_power])

    @classmethod
    def decode(cls, data: bytes) -> KittyGenes:
        raw = _check_length("KittyGenes", data, cls.SIZE)
        return cls(Color.decode(raw[0:3]), Color.decode(raw[3:6]), raw[6])


@dataclass(frozen=True)
class Kitty:
    """A kitty with its genes, timestamps and family links."""

    genes: KittyGenes
    birth_time: int = 0
    cooldown_end: int = 0
    matron_id: int = 0
    sire_id: int = 0
    siring_with_id: int = 0
    nr_children: int = 0
    generation: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">7sQQIIIHH")
    _WIDTHS: ClassVar[tuple[tuple[str, int], ...]] = (
        ("birth_time", 64),
        ("cooldown_end", 64),
        ("matron_id", 32),
        ("sire_id", 32),
        ("siring_with_id", 32),
        ("nr_children", 16),
        ("generation", 16),
    )

    def __post_init__(self) -> None:
        for name, bits in self._WIDTHS:
            _check_unsigned(name, getattr(self, name), bits)

    def encode(self) -> bytes:
        return self._FORMAT.pack(
            self.genes.encode(),
            self.birth_time,
            self.cooldown_end,
            self.matron_id,
            self.sire_id,
            self.siring_with_id,
            self.nr_children,
            self.generation,
        )

    @classmethod
    def decode(cls, data: bytes) -> Kitty:
        raw = _check_length("Kitty", data, cls._FORMAT.size)
        genes_raw, *rest = cls._FORMAT.unpack(raw)
        return cls(KittyGenes.decode(genes_raw), *rest)