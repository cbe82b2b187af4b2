# -*- coding: utf-8 -*-
import hashlib
import ipaddress

import numpy as np

from genkeys.utils.crypto import PUBLIC_KEY_SIZE

ADDRESS_SIZE = 16
ADDRESS_PREFIX = bytes([0x02])
TREE_ID_SIZE = hashlib.sha512().digest_size


def addr_for_key(public_key: bytes) -> bytes:
    """Derive the 16-byte network address for a public key.

    The NodeID is the bitwise inverse of the key. Its leading 1 bits are
    counted and stored in the byte after the prefix; those bits and the first
    0 bit after them are dropped, and the remaining bits fill the rest of the
    address. Lower keys therefore give more leading ones and more usable ID
    bits in the address.
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError("public key must be {} bytes, got {}".format(PUBLIC_KEY_SIZE, len(public_key)))
    node_id = np.frombuffer(bytes(public_key), dtype=np.uint8) ^ np.uint8(0xFF)
    bits = np.unpackbits(node_id)
    zeros = np.flatnonzero(bits == 0)
    if zeros.size == 0:
        ones = int(bits.size)
        rest = bits[:0]
    else:
        ones = int(zeros[0])
        rest = bits[ones + 1:]
    # trailing partial byte is discarded
    whole = (rest.size // 8) * 8
    packed = np.packbits(rest[:whole]).tobytes()
    addr = ADDRESS_PREFIX + bytes([ones & 0xFF]) + packed
    return addr[:ADDRESS_SIZE].ljust(ADDRESS_SIZE, b"\x00")


def format_address(addr: bytes) -> str:
    return str(ipaddress.IPv6Address(bytes(addr)))


def tree_id_for_key(public_key: bytes) -> bytes:
    return hashlib.sha512(bytes(public_key)).digest()
