import pytest
from hypothesis import given, strategies as st

from zombiefarm.kitty import Color, Kitty, KittyGenes

u8 = st.integers(0, 255)
colors = st.builds(Color, u8, u8, u8)
genes = st.builds(KittyGenes, colors, colors, u8)
kitties = st.builds(
    Kitty,
    genes,
    st.integers(0, 2**64 - 1),
    st.integers(0, 2**64 - 1),
    st.integers(0, 2**32 - 1),
    st.integers(0, 2**32 - 1),
    st.integers(0, 2**32 - 1),
    st.integers(0, 2**16 - 1),
    st.integers(0, 2**16 - 1),
)


@given(u8, u8, u8)
def test_color_as_u64_repeats_red(r, g, b):
    value = Color(r, g, b).as_u64()
    assert value == Color(r, 0, 0).as_u64()
    assert value & 0xFF == r
    assert (value >> 8) & 0xFF == r
    assert value >> 16 == r


@given(colors, colors, u8)
def test_genes_as_u64_layout(fur, eye, meow):
    value = KittyGenes(fur, eye, meow).as_u64()
    assert value & 0xFF == meow
    assert (value >> 8) & 0xFFFFFF == eye.as_u64()
    assert value >> 32 == fur.as_u64()


def test_color_encoding_is_channel_bytes():
    assert Color(1, 2, 3).encode() == bytes([1, 2, 3])


@given(colors)
def test_color_round_trip(color):
    assert Color.decode(color.encode()) == color


@given(genes)
def test_genes_round_trip(value):
    encoded = value.encode()
    assert encoded[:3] == value.fur_color.encode()
    assert encoded[3:6] == value.eye_color.encode()
    assert encoded[6] == value.meow_power
    assert KittyGenes.decode(encoded) == value


@given(kitties)
def test_kitty_round_trip(kitty):
    assert Kitty.decode(kitty.encode()) == kitty


def test_kitty_field_layout():
    kitty = Kitty(KittyGenes(Color(1, 2, 3), Color(4, 5, 6), 7), birth_time=258, generation=9)
    encoded = kitty.encode()
    assert encoded[:7] == bytes([1, 2, 3, 4, 5, 6, 7])
    assert encoded[7:15] == (258).to_bytes(8, "big")
    assert encoded[-2:] == (9).to_bytes(2, "big")


@pytest.mark.parametrize("field", ["r", "g", "b"])
def test_color_rejects_out_of_range(field):
    values = {"r": 0, "g": 0, "b": 0, field: 256}
    with pytest.raises(ValueError):
        Color(**values)


def test_kitty_rejects_negative_generation():
    with pytest.raises(ValueError):
        Kitty(KittyGenes(Color(0, 0, 0), Color(0, 0, 0), 0), generation=-1)


@given(kitties)
def test_kitty_decode_rejects_wrong_length(kitty):
    encoded = kitty.encode()
    with pytest.raises(ValueError):
        Kitty.decode(encoded[:-1])
    with pytest.raises(ValueError):
        Kitty.decode(encoded + b"\x00")


def test_color_decode_rejects_short_input():
    with pytest.raises(ValueError):
        Color.decode(b"\x01\x02")