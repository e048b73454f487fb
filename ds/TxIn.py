import io
import struct
from typing import NamedTuple, Tuple

from ds.OutPoint import OutPoint
from params.Params import Params
from utils.Utils import Utils


class TxIn(NamedTuple):
    """Inputs to a Transaction."""

    # A reference to the output we're spending.
    to_spend: OutPoint

    # the scriptSig which unlocks the TxOut for spending, empty for native
    # segwit inputs.
    signature_script: bytes = b''

    # A sender-defined sequence number which allows us replacement of the txn
    # if desired.
    sequence: int = Params.DEFAULT_SEQUENCE

    # The witness stack, one byte string per item.
    witness: Tuple[bytes, ...] = ()

    def serialize(self) -> bytes:
        return (self.to_spend.serialize() +
                Utils.varstr(self.signature_script) +
                struct.pack('<I', self.sequence))

    @classmethod
    def deserialize(cls, stream: io.BytesIO) -> 'TxIn':
        return cls(
            to_spend=OutPoint.deserialize(stream),
            signature_script=Utils.read_varstr(stream),
            sequence=Utils.read_uint(stream, '<I'))
