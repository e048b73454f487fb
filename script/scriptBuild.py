import logging
import os

import bech32

from . import opcodes
from . import scriptUtils
from .script import Builder, Tokenizer

from params.Params import Params

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def make_pk_script(pk_hash: bytes) -> bytes:
    """P2PKH script, also the script code BIP-143 signs for a P2WPKH input."""
    return Builder() \
        .push_opcode(opcodes.OP_DUP) \
        .push_opcode(opcodes.OP_HASH160) \
        .push_slice(pk_hash) \
        .push_opcode(opcodes.OP_EQUALVERIFY) \
        .push_opcode(opcodes.OP_CHECKSIG) \
        .into_script()


def make_witness_script(program: bytes) -> bytes:
    """Version 0 witness output script: OP_0 <program>."""
    return Builder().push_int(Params.WITNESS_VERSION).push_slice(program).into_script()


def get_p2wpkh_script(pubkey: bytes) -> bytes:
    return make_witness_script(scriptUtils.hash160(pubkey))


def get_p2wsh_script(witness_script: bytes) -> bytes:
    return make_witness_script(scriptUtils.sha256(witness_script))


# ——————————————Pk_script2Addr————————————————

def witness_program_to_address(program: bytes, network: str = Params.DEFAULT_NETWORK) -> str:
    if network not in Params.BECH32_HRP:
        raise ValueError(f'Unknown network: {network}')

    address = bech32.encode(Params.BECH32_HRP[network], Params.WITNESS_VERSION, program)
    if address is None:
        raise ValueError(f'Invalid witness program of {len(program)} bytes')
    return address


def get_address_from_pk_script(pk_script: bytes, network: str = Params.DEFAULT_NETWORK) -> str:
    """Bech32 address of a version 0 witness output script."""
    tokens = Tokenizer(pk_script)
    if len(tokens) != 2 or tokens.get_value(0) != b'' or not tokens.is_push(1):
        raise ValueError(f'Not a witness v0 output script: {tokens}')
    return witness_program_to_address(tokens.get_value(1), network)


def get_pk_script_from_address(address: str) -> bytes:
    for network, hrp in Params.BECH32_HRP.items():
        if not address.lower().startswith(hrp + '1'):
            continue
        witver, program = bech32.decode(hrp, address)
        if witver is not None and witver == Params.WITNESS_VERSION:
            return make_witness_script(bytes(program))
    raise ValueError(f'Not a witness v0 address: {address}')
