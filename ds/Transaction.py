import io
import logging
import os
import struct
from typing import List, NamedTuple

from utils.Errors import TxnDeserializationError
from utils.Utils import Utils
from params.Params import Params
from ds.TxIn import TxIn
from ds.TxOut import TxOut

from script import scriptUtils

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)

# BIP-144 marker and flag following the version of a transaction with witnesses
SEGWIT_MARKER = b'\x00'
SEGWIT_FLAG = b'\x01'


class Transaction(NamedTuple):
    # A list so that a finalized input can be put in place of the unsigned one.
    txins: List[TxIn]
    txouts: List[TxOut]

    locktime: int = Params.DEFAULT_LOCKTIME
    version: int = Params.TX_VERSION

    @property
    def has_witness(self) -> bool:
        return any(txin.witness for txin in self.txins)

    def serialize(self, with_witness: bool = True) -> bytes:
        """Consensus encoding; the witness form is used only when some input carries a witness."""
        with_witness = with_witness and self.has_witness

        data = struct.pack('<i', self.version)
        if with_witness:
            data += SEGWIT_MARKER + SEGWIT_FLAG
        data += Utils.varint(len(self.txins))
        data += b''.join(txin.serialize() for txin in self.txins)
        data += Utils.varint(len(self.txouts))
        data += b''.join(txout.serialize() for txout in self.txouts)
        if with_witness:
            data += b''.join(Utils.vector(txin.witness) for txin in self.txins)
        data += struct.pack('<I', self.locktime)
        return data

    @classmethod
    def deserialize(cls, data: bytes) -> 'Transaction':
        stream = io.BytesIO(data)

        version = Utils.read_uint(stream, '<i')
        txins_len = Utils.read_varint(stream)
        segwit = txins_len == 0
        if segwit:
            flag = Utils.read_exact(stream, 1)
            if flag != SEGWIT_FLAG:
                raise TxnDeserializationError(f'Unsupported segwit flag: {flag.hex()}')
            txins_len = Utils.read_varint(stream)

        txins = [TxIn.deserialize(stream) for _ in range(txins_len)]
        txouts = [TxOut.deserialize(stream) for _ in range(Utils.read_varint(stream))]

        if segwit:
            txins = [txin._replace(witness=tuple(Utils.read_vector(stream))) for txin in txins]
            if not any(txin.witness for txin in txins):
                raise TxnDeserializationError('Segwit transaction without witnesses')

        locktime = Utils.read_uint(stream, '<I')
        if stream.read(1):
            raise TxnDeserializationError('Unexpected trailing data after the transaction')

        return cls(txins=txins, txouts=txouts, locktime=locktime, version=version)

    @classmethod
    def from_hex(cls, s: str) -> 'Transaction':
        return cls.deserialize(Utils.from_hex(s))

    def to_hex(self) -> str:
        return Utils.to_hex(self.serialize())

    @property
    def txid(self) -> str:
        return Utils.to_hex(scriptUtils.sha256d(self.serialize(with_witness=False))[::-1])

    @property
    def wtxid(self) -> str:
        return Utils.to_hex(scriptUtils.sha256d(self.serialize())[::-1])
