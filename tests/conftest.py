# -*- coding: utf-8 -*-
from genkeys.utils.crypto import KeyPair


def make_keys(*head: int, fill: int = 0x00) -> KeyPair:
    """KeyPair whose public key starts with ``head`` and is padded with ``fill``."""
    pub = bytes(head) + bytes([fill]) * (32 - len(head))
    return KeyPair(bytes([0xA5]) * 32 + pub, pub)


class ListGenerator:
    def __init__(self, keys):
        self.keys = list(keys)
        self.calls = 0

    def __call__(self):
        keys = self.keys[self.calls]
        self.calls += 1
        return keys
