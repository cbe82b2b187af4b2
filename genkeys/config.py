# -*- coding: utf-8 -*-
import os
from typing import Optional

DEFAULT_MIN_WORDS = 0
MODE_ADDRESS = "address"
MODE_TREE = "tree"
MODES = (MODE_ADDRESS, MODE_TREE)


def default_threads() -> int:
    return os.cpu_count() or 1


class SearchSetting:
    def __init__(self, threads: Optional[int] = None, min_words: int = DEFAULT_MIN_WORDS, mode: str = MODE_ADDRESS):
        self.threads = int(threads) if threads is not None else default_threads()
        self.min_words = int(min_words)
        self.mode = (mode or MODE_ADDRESS).strip().lower()
        if self.threads < 1:
            raise ValueError("threads must be >= 1, got {}".format(self.threads))
        if self.min_words < 0:
            raise ValueError("min_words must be >= 0, got {}".format(self.min_words))
        if self.mode not in MODES:
            raise ValueError("unknown mode {!r}, expected one of {}".format(self.mode, ", ".join(MODES)))

    @property
    def queue_size(self) -> int:
        """Capacity of the hand-off queue: one slot per worker."""
        return self.threads

    def __repr__(self):
        return "SearchSetting(threads={}, min_words={}, mode={!r})".format(self.threads, self.min_words, self.mode)
