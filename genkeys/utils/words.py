# -*- coding: utf-8 -*-
from typing import Iterable, Optional

import numpy as np

# Pronounceable hex words, as big-endian 16-bit values
WORD_PATTERNS = np.array(
    [0xBABE, 0xBEAD, 0xBEEF, 0xDEAD, 0xDEAF, 0xDEED, 0xFACE, 0xFEED],
    dtype=np.uint16,
)

SCAN_START = 2


def count_words(addr: bytes, patterns: Optional[Iterable[int]] = None) -> int:
    """Count aligned 2-byte words of the address that appear in the pattern table.

    Only the first half of the address is scanned, and its first word is
    skipped (prefix and leading-ones byte).
    """
    table = WORD_PATTERNS if patterns is None else np.asarray(list(patterns), dtype=np.uint16)
    mid = len(addr) // 2
    if mid <= SCAN_START:
        return 0
    # windows start below the midpoint; the last one may straddle it
    end = SCAN_START + 2 * ((mid - SCAN_START + 1) // 2)
    words = np.frombuffer(bytes(addr[SCAN_START:end]), dtype=">u2")
    return int(np.isin(words, table).sum())
