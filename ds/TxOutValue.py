"""
How to get the balance of the output an input spends.

A caller either knows the amount, has the whole previous transaction or
has the spent output itself; `amount` resolves all three to satoshis.
"""
from typing import NamedTuple, Union

from ds.Transaction import Transaction
from ds.TxInRef import TxInRef
from ds.TxOut import TxOut


class Amount(NamedTuple):
    value: int


class PrevTx(NamedTuple):
    transaction: Transaction


class PrevOut(NamedTuple):
    txout: TxOut


TxOutValue = Union[Amount, PrevTx, PrevOut]


def of(value) -> TxOutValue:
    """Wraps a plain amount, a previous transaction or a previous output."""
    if isinstance(value, (Amount, PrevTx, PrevOut)):
        return value
    if isinstance(value, Transaction):
        return PrevTx(value)
    if isinstance(value, TxOut):
        return PrevOut(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Amount(value)
    raise TypeError(f"Can't get an output value from {type(value).__name__}")


def amount(value, txin: TxInRef) -> int:
    value = of(value)
    if isinstance(value, Amount):
        return value.value
    if isinstance(value, PrevTx):
        return value.transaction.txouts[txin.input.to_spend.txout_idx].value
    return value.txout.value
