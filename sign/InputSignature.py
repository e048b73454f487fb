"""
Segwit input signatures: a DER encoded ECDSA signature followed by one
sighash type byte, the form each signature takes in a witness stack.
"""
from enum import IntEnum

import ecdsa
from ecdsa.util import sigdecode_der

from utils.Errors import InputSignatureError
from utils.Utils import Utils


class SigHashType(IntEnum):
    ALL = 0x01
    NONE = 0x02
    SINGLE = 0x03
    ALL_ANYONECANPAY = 0x81
    NONE_ANYONECANPAY = 0x82
    SINGLE_ANYONECANPAY = 0x83

    @classmethod
    def from_byte(cls, value: int) -> 'SigHashType':
        # Unknown base types count as SIGHASH_ALL, the way the interpreter reads them.
        try:
            return cls(value & 0x9f)
        except ValueError:
            return cls.ALL


class InputSignatureRef(object):
    """A signature with its sighash type byte, as found in a witness."""

    __slots__ = ('_data',)

    def __init__(self, data: bytes):
        if not data:
            raise InputSignatureError('Input signature must contain at least the sighash type byte')
        self._data = bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'InputSignatureRef':
        """Checks that the signature part is valid DER before accepting it."""
        signature = cls(data)
        sigdecode_der(signature.content(), ecdsa.SECP256k1.order)
        return signature

    def content(self) -> bytes:
        """The signature without the sighash type byte."""
        return self._data[:-1]

    def sighash_type(self) -> SigHashType:
        return SigHashType.from_byte(self._data[-1])

    def __bytes__(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, InputSignatureRef):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return f"{type(self).__name__}('{Utils.to_hex(self._data)}')"


class InputSignature(InputSignatureRef):
    """A signature made by this package or taken over from raw bytes."""

    __slots__ = ()

    @classmethod
    def new(cls, raw_signature: bytes, sighash_type: SigHashType = SigHashType.ALL) -> 'InputSignature':
        return cls(bytes(raw_signature) + bytes([sighash_type]))

    @classmethod
    def from_bytes(cls, data: bytes) -> 'InputSignature':
        return cls(data)

    def as_ref(self) -> InputSignatureRef:
        return InputSignatureRef(self._data)
