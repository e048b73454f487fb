"""
Helpers for the redeem scripts used in multisignature transactions.

A standard redeem script has the form

    <quorum> <pubkey_1> ... <pubkey_n> <n> OP_CHECKMULTISIG

See https://github.com/bitcoin/bips/blob/master/bip-0141.mediawiki#p2wsh
"""
import logging
import os
from typing import Iterable, List, NamedTuple

import ecdsa

from utils.Errors import (ScriptError, IncorrectQuorumError, NoQuorumError,
                          NotEnoughPublicKeysError, NotStandardError)
from utils.Utils import Utils
from params.Params import Params
from wallet.Wallet import Wallet

from . import opcodes
from .script import Builder, Tokenizer

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)

__all__ = ['RedeemScript', 'RedeemScriptContent', 'RedeemScriptBuilder']


def _read_usize(tokens: Tokenizer, index: int):
    """A quorum or key count: OP_0 .. OP_16 or a short little-endian push."""
    if index >= len(tokens):
        return None
    if tokens.is_push(index):
        data = tokens.get_value(index)
        if len(data) > Params.MAX_SCRIPT_NUM_SIZE:
            return None
        return int.from_bytes(data, 'little')
    return opcodes.small_int(tokens[index])


class RedeemScriptContent(NamedTuple):
    # The public keys of the participants, in the order they are in the script.
    public_keys: List[ecdsa.VerifyingKey]
    # The number of signatures required to spend the input.
    quorum: int

    @classmethod
    def parse(cls, script: bytes) -> 'RedeemScriptContent':
        """Reads a standard redeem script, raising a `RedeemScriptError` for anything else."""
        try:
            tokens = Tokenizer(script)
        except ScriptError as e:
            raise NotStandardError() from e

        if not len(tokens):
            raise NoQuorumError()
        quorum = _read_usize(tokens, 0)
        if quorum is None:
            raise NotStandardError()

        public_keys = []
        index = 1
        while index < len(tokens) and tokens.is_push(index):
            data = tokens.get_value(index)
            # The key count may be pushed as data too, but a key is never a single byte.
            if len(data) == 1:
                break
            try:
                public_keys.append(Wallet.public_key_from_bytes(data))
            except (ecdsa.MalformedPointError, ValueError) as e:
                raise NotStandardError() from e
            index += 1

        public_keys_len = _read_usize(tokens, index)
        if public_keys_len is None:
            raise NotStandardError()
        if public_keys_len != len(public_keys):
            raise NotEnoughPublicKeysError()
        index += 1

        # OP_CHECKMULTISIG must be the last instruction
        if index != len(tokens) - 1 or tokens[index] != opcodes.OP_CHECKMULTISIG:
            raise NotStandardError()

        content = cls(public_keys=public_keys, quorum=quorum)
        content.check()
        return content

    def check(self):
        if self.quorum <= 0:
            raise NoQuorumError()
        if not self.public_keys:
            raise NotEnoughPublicKeysError()
        if len(self.public_keys) < self.quorum:
            raise IncorrectQuorumError()


class RedeemScript(object):
    """A standard redeem script; holding one means the bytes have been validated."""

    __slots__ = ('_script',)

    def __init__(self, script: bytes):
        RedeemScriptContent.parse(script)
        self._script = bytes(script)

    @classmethod
    def from_script(cls, script: bytes) -> 'RedeemScript':
        return cls(script)

    @classmethod
    def from_hex(cls, s: str) -> 'RedeemScript':
        return cls(Utils.from_hex(s))

    def content(self) -> RedeemScriptContent:
        return RedeemScriptContent.parse(self._script)

    def __bytes__(self):
        return self._script

    def __str__(self):
        return Utils.to_hex(self._script)

    def __repr__(self):
        return f"RedeemScript('{self}')"

    def __eq__(self, other):
        if not isinstance(other, RedeemScript):
            return NotImplemented
        return self._script == other._script

    def __hash__(self):
        return hash(self._script)


class RedeemScriptBuilder(object):
    """
    Collects the quorum and the public keys of a redeem script.

    Only `to_script` checks the collected values, every other method just
    records them and returns the builder:

        RedeemScriptBuilder.with_public_keys(keys).quorum(3).to_script()
    """

    def __init__(self, quorum: int = 0, public_keys: Iterable[ecdsa.VerifyingKey] = ()):
        self._quorum = quorum
        self._public_keys = list(public_keys)

    @classmethod
    def with_quorum(cls, quorum: int) -> 'RedeemScriptBuilder':
        return cls(quorum=quorum)

    @classmethod
    def with_public_keys(cls, public_keys: Iterable[ecdsa.VerifyingKey]) -> 'RedeemScriptBuilder':
        """Builder for the given keys, by default all of them are required to sign."""
        public_keys = list(public_keys)
        return cls(quorum=len(public_keys), public_keys=public_keys)

    def public_key(self, public_key: ecdsa.VerifyingKey) -> 'RedeemScriptBuilder':
        self._public_keys.append(public_key)
        return self

    def quorum(self, quorum: int) -> 'RedeemScriptBuilder':
        self._quorum = quorum
        return self

    def to_script(self) -> RedeemScript:
        RedeemScriptContent(public_keys=self._public_keys, quorum=self._quorum).check()

        builder = Builder().push_int(self._quorum)
        for public_key in self._public_keys:
            builder.push_slice(Wallet.compressed(public_key))
        script = builder \
            .push_int(len(self._public_keys)) \
            .push_opcode(opcodes.OP_CHECKMULTISIG) \
            .into_script()

        logger.debug(f'[multisig] built {self._quorum}-of-{len(self._public_keys)} redeem script')
        return RedeemScript(script)
