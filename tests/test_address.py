# -*- coding: utf-8 -*-
import pytest

from genkeys.utils.address import addr_for_key, format_address, tree_id_for_key
from genkeys.utils.crypto import generate_keypair


def test_all_ones_key_has_no_leading_ones():
    addr = addr_for_key(b"\xff" * 32)
    assert addr == b"\x02" + b"\x00" * 15
    assert format_address(addr) == "200::"


def test_leading_ones_counted():
    addr = addr_for_key(b"\x00" + b"\xff" * 31)
    assert addr[:2] == b"\x02\x08"
    assert addr[2:] == b"\x00" * 14


def test_bits_after_first_zero_are_shifted_in():
    # NodeID 0xc0ff..: two ones, a dropped zero, then 00000 111...
    addr = addr_for_key(b"\x3f" + b"\x00" * 31)
    assert addr == b"\x02\x02\x07" + b"\xff" * 13
    assert format_address(addr) == "202:7ff:ffff:ffff:ffff:ffff:ffff:ffff"


def test_lower_key_gives_more_leading_ones():
    assert addr_for_key(b"\x00\x00" + b"\xff" * 30)[1] > addr_for_key(b"\x00" + b"\xff" * 31)[1]


def test_deterministic_and_sized():
    pub = generate_keypair().public_key
    assert addr_for_key(pub) == addr_for_key(pub)
    assert len(addr_for_key(pub)) == 16


def test_rejects_wrong_length():
    with pytest.raises(ValueError):
        addr_for_key(b"\x00" * 31)


def test_tree_id_is_sha512():
    assert len(tree_id_for_key(b"\x00" * 32)) == 64
    assert tree_id_for_key(b"\x00" * 32) != tree_id_for_key(b"\x01" * 32)
