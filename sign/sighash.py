"""
BIP-143 signature hashes and the segwit input signatures made over them.

https://github.com/bitcoin/bips/blob/master/bip-0143.mediawiki
"""
import hashlib
import logging
import os
import struct

import ecdsa
from ecdsa.util import sigdecode_der, sigencode_der_canonize

from ds import TxOutValue
from ds.TxInRef import TxInRef
from params.Params import Params
from script import scriptUtils
from utils.Utils import Utils

from .InputSignature import InputSignature, SigHashType

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def signature_hash(txin: TxInRef, script: bytes, value) -> bytes:
    """
    The SIGHASH_ALL digest of a witness v0 input.

    :param txin: the input being signed
    :param script: the script code, the P2PKH script of the key for P2WPKH
        or the witness (redeem) script for P2WSH
    :param value: the amount of the spent output, see `ds.TxOutValue`
    :return: 32 byte double SHA-256 digest
    """
    amount = TxOutValue.amount(value, txin)
    transaction = txin.transaction
    this_input = txin.input

    hash_prevouts = scriptUtils.sha256d(
        b''.join(i.to_spend.serialize() for i in transaction.txins))
    hash_sequence = scriptUtils.sha256d(
        b''.join(struct.pack('<I', i.sequence) for i in transaction.txins))
    hash_outputs = scriptUtils.sha256d(
        b''.join(o.serialize() for o in transaction.txouts))

    preimage = (
        struct.pack('<i', transaction.version) +
        hash_prevouts +
        hash_sequence +
        this_input.to_spend.serialize() +
        Utils.varstr(script) +
        struct.pack('<Q', amount) +
        struct.pack('<I', this_input.sequence) +
        hash_outputs +
        struct.pack('<I', transaction.locktime) +
        struct.pack('<I', Params.SIGHASH_ALL)
    )
    sighash = scriptUtils.sha256d(preimage)
    logger.debug(f'[sighash] input {txin.index} of {transaction.txid}: {sighash.hex()}')
    return sighash


def sign_input(signing_key: ecdsa.SigningKey, txin: TxInRef, script: bytes, value) -> InputSignature:
    """Signs the input's digest with RFC 6979 nonces and a low S value."""
    sighash = signature_hash(txin, script, value)
    signature = signing_key.sign_digest_deterministic(
        sighash, hashfunc=hashlib.sha256, sigencode=sigencode_der_canonize)
    return InputSignature.new(signature, SigHashType.ALL)


def verify_input_signature(txin: TxInRef, script: bytes, value,
                           public_key: ecdsa.VerifyingKey, signature: bytes) -> bool:
    """
    Checks a DER signature (without the sighash byte) over the input's digest.

    Raises `ecdsa.BadSignatureError` when it does not match.
    """
    sighash = signature_hash(txin, script, value)
    try:
        return public_key.verify_digest(signature, sighash, sigdecode=sigdecode_der)
    except ecdsa.BadSignatureError:
        logger.debug(f'[sighash] signature does not match input {txin.index}')
        raise
