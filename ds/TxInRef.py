from ds.Transaction import Transaction
from ds.TxIn import TxIn


class TxInRef(object):
    """
    A reference to the input with the given index of the given transaction.

    The transaction is not copied: callers must not modify it while the
    reference is in use, except through a signer's `spend_input`.
    """

    __slots__ = ('_transaction', '_index')

    def __init__(self, transaction: Transaction, index: int):
        assert 0 <= index < len(transaction.txins), \
            f'input index {index} out of range for {len(transaction.txins)} inputs'
        self._transaction = transaction
        self._index = index

    @property
    def transaction(self) -> Transaction:
        return self._transaction

    @property
    def index(self) -> int:
        return self._index

    @property
    def input(self) -> TxIn:
        return self._transaction.txins[self._index]

    def replace_input(self, txin: TxIn):
        self._transaction.txins[self._index] = txin

    def __repr__(self):
        return f'TxInRef(txid={self._transaction.txid}, index={self._index})'
