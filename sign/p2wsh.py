"""
Native segwit multisig (P2WSH) inputs.

Every participant signs the same digest with its own key. The witness of a
spent input is

    [<empty>, <signature_1>, ..., <signature_k>, <redeem script>]

where the signatures follow the order of their public keys in the redeem
script. The empty item is consumed by OP_CHECKMULTISIG, which pops one more
element than it uses.
"""
import logging
import os
from typing import Iterable

import ecdsa

from ds.TxInRef import TxInRef
from params.Params import Params
from script import scriptBuild, scriptUtils
from script.multisig import RedeemScript

from . import sighash
from .InputSignature import InputSignature, InputSignatureRef

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


def address(redeem_script: RedeemScript, network: str = Params.DEFAULT_NETWORK) -> str:
    return scriptBuild.witness_program_to_address(scriptUtils.sha256(bytes(redeem_script)), network)


def script_pubkey(redeem_script: RedeemScript) -> bytes:
    return scriptBuild.get_p2wsh_script(bytes(redeem_script))


class InputSigner(object):
    """Signs and spends the P2WSH inputs locked by a redeem script."""

    def __init__(self, redeem_script: RedeemScript):
        self.redeem_script = redeem_script

    def signature_hash(self, txin: TxInRef, value) -> bytes:
        return sighash.signature_hash(txin, bytes(self.redeem_script), value)

    def sign_input(self, txin: TxInRef, value, secret_key: ecdsa.SigningKey) -> InputSignature:
        return sighash.sign_input(secret_key, txin, bytes(self.redeem_script), value)

    def verify_input(self, txin: TxInRef, value, public_key: ecdsa.VerifyingKey, signature) -> bool:
        """Same contract as `p2wpk.InputSigner.verify_input`."""
        if isinstance(signature, InputSignatureRef):
            signature = signature.content()
        return sighash.verify_input_signature(
            txin, bytes(self.redeem_script), value, public_key, bytes(signature))

    def spend_input(self, txin: TxInRef, signatures: Iterable[InputSignature]):
        """
        Collects the signatures into the witness of the referenced input.

        The signatures must already be in redeem script key order, otherwise
        the input will not validate even though each signature is correct.
        """
        witness = [b'']
        witness.extend(bytes(signature) for signature in signatures)
        witness.append(bytes(self.redeem_script))
        txin.replace_input(txin.input._replace(witness=tuple(witness)))
        logger.debug(f'[p2wsh] spent input {txin.index} with {len(witness) - 2} signatures')
