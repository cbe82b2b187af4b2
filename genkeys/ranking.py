# -*- coding: utf-8 -*-
from typing import Callable

from genkeys.config import MODE_ADDRESS, MODE_TREE
from genkeys.utils.address import TREE_ID_SIZE, tree_id_for_key
from genkeys.utils.crypto import PUBLIC_KEY_SIZE


def is_better(old: bytes, new: bytes) -> bool:
    """True if ``new`` is strictly lower than ``old`` at the first differing byte.

    Equal sequences are never better.
    """
    for old_byte, new_byte in zip(old, new):
        if new_byte < old_byte:
            return True
        if new_byte > old_byte:
            return False
    return False


class Ranker:
    def __init__(self, name: str, label: str, key: Callable[[bytes], bytes], size: int, lower_wins: bool = True):
        self.name = name
        self.label = label
        self.key = key
        self.size = size
        self.lower_wins = bool(lower_wins)

    def rank_key(self, public_key: bytes) -> bytes:
        return self.key(public_key)

    def worst(self) -> bytes:
        """Watermark that every real rank key beats (or ties)."""
        return bytes([0xFF if self.lower_wins else 0x00]) * self.size

    def better(self, incumbent: bytes, candidate: bytes) -> bool:
        if self.lower_wins:
            return is_better(incumbent, candidate)
        return is_better(candidate, incumbent)

    def __repr__(self):
        return "Ranker({!r})".format(self.name)


NODE_ID_RANKER = Ranker(MODE_ADDRESS, "IP", bytes, PUBLIC_KEY_SIZE, lower_wins=True)
# Higher TreeID makes the node a better root candidate
TREE_ID_RANKER = Ranker(MODE_TREE, "TreeID", tree_id_for_key, TREE_ID_SIZE, lower_wins=False)

RANKERS = {r.name: r for r in (NODE_ID_RANKER, TREE_ID_RANKER)}


def get_ranker(mode: str) -> Ranker:
    try:
        return RANKERS[mode]
    except KeyError:
        raise ValueError("unknown ranking mode {!r}".format(mode))
