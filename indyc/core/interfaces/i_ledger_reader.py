# indyc/core/interfaces/i_ledger_reader.py

from abc import ABC, abstractmethod

from indyc.core.models.reply import Reply

class ILedgerReader(ABC):
    """Contrato mínimo de lectura del ledger (una transacción por número de secuencia)."""

    @abstractmethod
    def get_transaction(self, ledger: int, seq_no: int) -> Reply:
        """
        Retorna la respuesta terminal del validador.

        Raises:
            PoolConnectionError, ProtocolViolationError, RequestIOError
        """
        pass
