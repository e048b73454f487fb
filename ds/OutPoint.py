import io
import struct
from typing import NamedTuple

from utils.Utils import Utils


class OutPoint(NamedTuple):
    """Used to represent the specific output within a transaction."""

    # Display (big-endian) hex of the transaction id, as block explorers show it.
    txid: str
    txout_idx: int

    def serialize(self) -> bytes:
        return Utils.from_hex(self.txid)[::-1] + struct.pack('<I', self.txout_idx)

    @classmethod
    def deserialize(cls, stream: io.BytesIO) -> 'OutPoint':
        txid = Utils.to_hex(Utils.read_exact(stream, 32)[::-1])
        return cls(txid=txid, txout_idx=Utils.read_uint(stream, '<I'))
