# -*- coding: utf-8 -*-
from dataclasses import dataclass

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey
from nacl.utils import random as random_bytes

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64


class EntropySourceFailure(RuntimeError):
    """The secure random source could not produce key material."""


@dataclass(frozen=True)
class KeyPair:
    private_key: bytes  # seed || public key, 64 bytes
    public_key: bytes

    def private_hex(self) -> str:
        return self.private_key.hex()

    def public_hex(self) -> str:
        return self.public_key.hex()


def keypair_from_seed(seed: bytes) -> KeyPair:
    if len(seed) != SEED_SIZE:
        raise ValueError("seed must be {} bytes".format(SEED_SIZE))
    pub = bytes(SigningKey(seed).verify_key)
    return KeyPair(bytes(seed) + pub, pub)


def generate_keypair() -> KeyPair:
    """Generate a fresh Ed25519 keypair from the system CSPRNG.

    Raises EntropySourceFailure if the random source errors or returns
    short output; callers must not retry.
    """
    try:
        seed = random_bytes(SEED_SIZE)
    except (OSError, CryptoError) as e:
        raise EntropySourceFailure("secure random source failed: {}".format(e)) from e
    if len(seed) != SEED_SIZE:
        raise EntropySourceFailure("secure random source returned {} of {} bytes".format(len(seed), SEED_SIZE))
    return keypair_from_seed(seed)
