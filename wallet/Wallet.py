import logging
import os
import random
from typing import Tuple

import ecdsa
from base58 import b58decode_check, b58encode_check

from ds.Transaction import Transaction
from params.Params import Params

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


class Wallet(object):
    """Key pair helpers around the ecdsa engine, plus transaction fixtures."""

    def __init__(self, signing_key, verifying_key):
        self.signing_key = signing_key
        self.verifying_key = verifying_key

    def __call__(self):
        return self.verifying_key, self.signing_key

    @classmethod
    def compressed(cls, verifying_key: ecdsa.VerifyingKey) -> bytes:
        return verifying_key.to_string('compressed')

    @classmethod
    def public_key_from_bytes(cls, data: bytes) -> ecdsa.VerifyingKey:
        """
        Decodes a serialized secp256k1 public key, compressed or not.

        Raises `ecdsa.MalformedPointError` for anything that is not a point
        on the curve in one of the two serializations.
        """
        if len(data) not in (Params.COMPRESSED_PUBKEY_SIZE, Params.UNCOMPRESSED_PUBKEY_SIZE):
            raise ecdsa.MalformedPointError(
                f'Public key must be {Params.COMPRESSED_PUBKEY_SIZE} or '
                f'{Params.UNCOMPRESSED_PUBKEY_SIZE} bytes long, got {len(data)}')
        return ecdsa.VerifyingKey.from_string(data, curve=ecdsa.SECP256k1)

    @classmethod
    def secret_key_to_wif(cls, signing_key: ecdsa.SigningKey, network: str = Params.DEFAULT_NETWORK) -> str:
        """Base58check WIF of a secret key whose public key is used compressed."""
        return b58encode_check(Params.WIF_PREFIX[network] + signing_key.to_string() + b'\x01').decode()

    @classmethod
    def secret_key_from_wif(cls, wif: str) -> ecdsa.SigningKey:
        data = b58decode_check(wif)
        if data[:1] not in Params.WIF_PREFIX.values() or len(data) != 34 or data[-1] != 1:
            raise ValueError('Not a compressed WIF secret key')
        return ecdsa.SigningKey.from_string(data[1:33], curve=ecdsa.SECP256k1)

    @classmethod
    def gen_keypair_with_rng(cls, rng: random.Random) -> Tuple[ecdsa.VerifyingKey, ecdsa.SigningKey]:
        """Deterministic key pair drawn from a seeded `random.Random`, for tests and fixtures."""
        signing_key = ecdsa.SigningKey.generate(
            curve=ecdsa.SECP256k1,
            entropy=lambda n: rng.getrandbits(8 * n).to_bytes(n, 'big'))
        return signing_key.get_verifying_key(), signing_key

    @classmethod
    def gen_keypair(cls) -> Tuple[ecdsa.VerifyingKey, ecdsa.SigningKey]:
        signing_key = ecdsa.SigningKey.generate(curve=ecdsa.SECP256k1)
        logger.debug(f"[wallet] generated key {Wallet.compressed(signing_key.get_verifying_key()).hex()}")
        return signing_key.get_verifying_key(), signing_key

    @classmethod
    def init_wallet(cls, rng: random.Random = None) -> 'Wallet':
        public_key, secret_key = cls.gen_keypair_with_rng(rng) if rng else cls.gen_keypair()
        return cls(secret_key, public_key)

    @classmethod
    def btc_tx_from_hex(cls, s: str) -> Transaction:
        return Transaction.from_hex(s)
