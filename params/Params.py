from typing import Iterable, Mapping


class Params:
    # Networks an address can be derived for. The network never changes
    # the signing process, only the human readable part of an address.
    NETWORKS: Iterable[str] = ('bitcoin', 'testnet', 'regtest')
    DEFAULT_NETWORK = 'testnet'

    # #realname bech32_hrp
    BECH32_HRP: Mapping[str, str] = {
        'bitcoin': 'bc',
        'testnet': 'tb',
        'regtest': 'bcrt',
    }

    # Only version 0 witness programs (P2WPKH / P2WSH) are produced.
    WITNESS_VERSION = int(0)

    # Sighash type appended to every signature we make. #realname SIGHASH_ALL
    SIGHASH_ALL = int(0x01)

    # Transaction defaults used by the command line tool and the tests.
    TX_VERSION = int(2)
    DEFAULT_SEQUENCE = int(0xFFFFFFFF)
    DEFAULT_LOCKTIME = int(0)

    # A quorum or a key count is read from a push of at most this many bytes,
    # the same limit the interpreter puts on numeric operands.
    MAX_SCRIPT_NUM_SIZE = int(4)

    # Sizes of the serialized secp256k1 public keys.
    COMPRESSED_PUBKEY_SIZE = int(33)
    UNCOMPRESSED_PUBKEY_SIZE = int(65)

    # Version bytes of base58check WIF secret keys.
    WIF_PREFIX: Mapping[str, bytes] = {
        'bitcoin': b'\x80',
        'testnet': b'\xef',
        'regtest': b'\xef',
    }
