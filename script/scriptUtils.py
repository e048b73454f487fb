import hashlib

from Crypto.Hash import RIPEMD160

__all__ = ['sha256', 'sha256d', 'ripemd160', 'hash160']


# ————————————————Hash Utils——————————————————
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    return sha256(sha256(data))


# hashlib only offers ripemd160 when openssl still ships the legacy provider
def ripemd160(data: bytes) -> bytes:
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    return ripemd160(sha256(data))
