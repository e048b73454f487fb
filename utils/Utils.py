import binascii
import io
import logging
import os
import struct
from typing import Iterable, Union

from utils.Errors import TxnDeserializationError

logging.basicConfig(
    level=getattr(logging, os.environ.get('TU_LOG_LEVEL', 'INFO')),
    format='[%(asctime)s][%(module)s:%(lineno)d] %(levelname)s %(message)s')
logger = logging.getLogger(__name__)


class Utils(object):
    """Consensus encoding helpers shared by the transaction model and the sighash code."""

    @classmethod
    def varint(cls, n: int) -> bytes:
        """CompactSize encoding of `n`."""
        if n < 0xfd:
            return struct.pack('<B', n)
        elif n <= 0xffff:
            return b'\xfd' + struct.pack('<H', n)
        elif n <= 0xffffffff:
            return b'\xfe' + struct.pack('<I', n)
        return b'\xff' + struct.pack('<Q', n)

    @classmethod
    def varstr(cls, data: bytes) -> bytes:
        return cls.varint(len(data)) + data

    @classmethod
    def vector(cls, items: Iterable[bytes]) -> bytes:
        """Length prefixed list of length prefixed byte strings (a witness stack)."""
        items = list(items)
        return cls.varint(len(items)) + b''.join(cls.varstr(i) for i in items)

    @classmethod
    def read_exact(cls, stream: io.BytesIO, size: int) -> bytes:
        data = stream.read(size)
        if len(data) != size:
            raise TxnDeserializationError(
                f'Unexpected end of data: wanted {size} bytes, got {len(data)}')
        return data

    @classmethod
    def read_uint(cls, stream: io.BytesIO, fmt: str) -> int:
        return struct.unpack(fmt, cls.read_exact(stream, struct.calcsize(fmt)))[0]

    @classmethod
    def read_varint(cls, stream: io.BytesIO) -> int:
        prefix = cls.read_uint(stream, '<B')
        if prefix == 0xfd:
            return cls.read_uint(stream, '<H')
        elif prefix == 0xfe:
            return cls.read_uint(stream, '<I')
        elif prefix == 0xff:
            return cls.read_uint(stream, '<Q')
        return prefix

    @classmethod
    def read_varstr(cls, stream: io.BytesIO) -> bytes:
        return cls.read_exact(stream, cls.read_varint(stream))

    @classmethod
    def read_vector(cls, stream: io.BytesIO) -> list:
        return [cls.read_varstr(stream) for _ in range(cls.read_varint(stream))]

    @classmethod
    def to_hex(cls, data: bytes) -> str:
        return binascii.hexlify(data).decode()

    @classmethod
    def from_hex(cls, s: Union[str, bytes]) -> bytes:
        try:
            return binascii.unhexlify(s.strip())
        except (binascii.Error, ValueError):
            logger.exception(f'[utils] not a hex string: {s!r}')
            raise
