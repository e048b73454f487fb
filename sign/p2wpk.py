"""
Native segwit single key (P2WPKH) inputs.

The witness of a spent input is `[<signature>, <compressed public key>]`.
"""
import logging
import os

import ecdsa

from ds.TxInRef import TxInRef
from params.Params import Params
from script import scriptBuild, scriptUtils
from wallet.Wallet import Wallet

from . import sighash
from .InputSignature import InputSignature, InputSignatureRef

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def address(public_key: ecdsa.VerifyingKey, network: str = Params.DEFAULT_NETWORK) -> str:
    return scriptBuild.witness_program_to_address(
        scriptUtils.hash160(Wallet.compressed(public_key)), network)


def script_pubkey(public_key: ecdsa.VerifyingKey) -> bytes:
    return scriptBuild.get_p2wpkh_script(Wallet.compressed(public_key))


class InputSigner(object):
    """Signs and spends the P2WPKH inputs of a single public key."""

    def __init__(self, public_key: ecdsa.VerifyingKey, network: str = Params.DEFAULT_NETWORK):
        self.public_key = public_key
        self.network = network

    def address(self) -> str:
        return address(self.public_key, self.network)

    def witness_script(self) -> bytes:
        """The script code BIP-143 commits to: the P2PKH script of the key."""
        return scriptBuild.make_pk_script(scriptUtils.hash160(Wallet.compressed(self.public_key)))

    def signature_hash(self, txin: TxInRef, value) -> bytes:
        return sighash.signature_hash(txin, self.witness_script(), value)

    def sign_input(self, txin: TxInRef, value, secret_key: ecdsa.SigningKey) -> InputSignature:
        return sighash.sign_input(secret_key, txin, self.witness_script(), value)

    def verify_input(self, txin: TxInRef, value, public_key: ecdsa.VerifyingKey, signature) -> bool:
        """
        Checks a signature for the given input.

        `signature` is an `InputSignature(Ref)` or the DER bytes without the
        sighash type byte. Raises `ecdsa.BadSignatureError` on mismatch.
        """
        if isinstance(signature, InputSignatureRef):
            signature = signature.content()
        return sighash.verify_input_signature(
            txin, self.witness_script(), value, public_key, bytes(signature))

    def spend_input(self, txin: TxInRef, signature: InputSignature):
        """Puts the witness into the referenced input, which becomes spent."""
        witness = (bytes(signature), Wallet.compressed(self.public_key))
        txin.replace_input(txin.input._replace(witness=witness))
        logger.debug(f'[p2wpk] spent input {txin.index} with {self.address()}')
