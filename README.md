# zombiefarm

A small in-memory zombie game. A `ZombiesContract` keeps track of zombies,
who owns them, and which zombies each owner holds. Each owner can create
one random zombie. After that, zombies multiply by feeding.

The package also has a `kitty` module. It describes kitties, their genes
and their colours, and gives them a fixed binary encoding.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Zombies

```python
import random

from zombiefarm.contract import ContractError, ZombiesContract

game = ZombiesContract(random.Random(7))

# Each owner can create exactly one random zombie; the new id is returned.
first_id = game.create_random_zombie("alice", b"Rex")
print(game.zombie(first_id).dna)         # below 10 ** game.dna_digits

# Feeding creates a new zombie named b"NoName". Its DNA is the average of
# the zombie's DNA and the target DNA, after the target DNA is reduced
# modulo 10 ** dna_digits.
child_id = game.feed_and_multiply("alice", first_id, 1234567890123456)
print(sorted(game.owned_zombies("alice")))  # [first_id, child_id]

# Only the owner may feed a zombie.
try:
    game.feed_and_multiply("bob", first_id, 42)
except ContractError as err:
    print(err)   # Only the owner of the zombie can perform this operation

# A second random zombie for the same owner is refused.
try:
    game.create_random_zombie("alice", b"Again")
except ContractError as err:
    print(err)   # You already own a zombie
```

Details:

- Owners can be any hashable value, such as a string or a tuple.
- Zombie ids start at 1 and go up by one for each zombie created. The next
  id is in `zombie_last_index`.
- `dna_digits` defaults to 16. `generate_random_dna()` returns a value in
  `range(0, 10 ** dna_digits)` from the `random.Random` you pass in. If you
  pass none, a fresh one is used.
- `create_zombie(owner, name, dna)` stores a zombie directly, with no
  ownership check, and returns its id. Names can be `bytes` or `str`. A
  `str` name is stored as UTF-8.
- `zombie(zombie_id)` raises `ContractError` for an unknown id.
  `zombie_owner(zombie_id)` returns `None` for an unknown id.
  `owned_zombies(owner)` returns a `frozenset` of ids.
- Each created zombie appends a `NewZombieEvent(zombie_id, name, dna)` to
  `game.events`.

## Encodings

`Zombie`, `Color`, `KittyGenes` and `Kitty` are frozen dataclasses. Each one
has `encode()` and a `decode()` class method:

```python
from zombiefarm.contract import Zombie
from zombiefarm.kitty import Color, Kitty, KittyGenes

zombie = Zombie(name=b"Rex", dna=42)
assert Zombie.decode(zombie.encode()) == zombie

genes = KittyGenes(fur_color=Color(1, 2, 3), eye_color=Color(4, 5, 6), meow_power=7)
assert KittyGenes.decode(genes.encode()) == genes

kitty = Kitty(genes, birth_time=100, generation=1)
assert Kitty.decode(kitty.encode()) == kitty
```

The encodings are:

- `Zombie`: a 4-byte big-endian length, then the name, then the DNA as 8
  big-endian bytes.
- `Color`: 3 bytes, in the order r, g, b.
- `KittyGenes`: 7 bytes (fur colour, eye colour, meow power).
- `Kitty`: 37 bytes. The genes come first, followed by big-endian integers of
  fixed width.

Out-of-range fields raise `ValueError`. Data of the wrong length also raises
`ValueError`.

`Color.as_u64()` packs the red channel into all three bytes, so green and
blue are ignored. `KittyGenes.as_u64()` packs fur colour, eye colour and meow
power into one integer. The genes in the example above give
`0x01010104040407`.

## What it does not do

- Everything lives in memory. Nothing is saved.
- The package has no command-line program.
- Kitties are data records only. There is no kitty ownership, breeding or
  auctioning.