import io
import struct
from typing import NamedTuple

from utils.Utils import Utils


class TxOut(NamedTuple):
    """Outputs from a Transaction."""
    # The number of satoshis this awards.
    value: int

    # define pk_script(scriptPublicKey) here
    pk_script: bytes

    def serialize(self) -> bytes:
        return struct.pack('<Q', self.value) + Utils.varstr(self.pk_script)

    @classmethod
    def deserialize(cls, stream: io.BytesIO) -> 'TxOut':
        value = Utils.read_uint(stream, '<Q')
        return cls(value=value, pk_script=Utils.read_varstr(stream))
