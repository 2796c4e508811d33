from __future__ import annotations

from typing import Iterable, Iterator

from ..errors import InvalidInputError
from .game import Coalition


def enumerate_coalitions(n: int) -> Iterator[Coalition]:
    """Yield every subset of ``{0, ..., n-1}``.

    Subsets come out in bitmask order: the integer ``i`` stands for the
    coalition whose members are the set bits of ``i``. Members are listed in
    increasing index order.
    """
    if n <= 0:
        msg = f"Cannot enumerate coalitions of {n} players."
        raise InvalidInputError(msg)
    return _iter_masks(n)


def _iter_masks(n: int) -> Iterator[Coalition]:
    for mask in range(1 << n):
        yield coalition_from_bitmask(mask)


def coalition_from_bitmask(mask: int) -> Coalition:
    players: list[int] = []
    i = 0
    while mask:
        if mask & 1:
            players.append(i)
        mask >>= 1
        i += 1
    return tuple(players)


def coalition_to_str(coalition: Iterable[int]) -> str:
    members = sorted(coalition)
    if not members:
        return "{}"
    return "{" + ",".join(str(x) for x in members) + "}"
