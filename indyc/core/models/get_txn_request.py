# indyc/core/models/get_txn_request.py

import json
from typing import Dict, Any

from indyc.core.config.protocol_constants import ProtocolConstants

class GetTxnRequest:
    """Petición de lectura GET_TXN: una transacción de un ledger por número de secuencia."""

    def __init__(self, req_id: int, ledger_id: int, seq_no: int,
                 identifier: str = ProtocolConstants.DEFAULT_IDENTIFIER) -> None:
        if seq_no < 1:
            raise ValueError(f"Número de secuencia inválido: {seq_no}")

        self._req_id = req_id
        self._ledger_id = int(ledger_id)
        self._seq_no = seq_no
        self._identifier = identifier

    @property
    def req_id(self) -> int: return self._req_id
    @property
    def ledger_id(self) -> int: return self._ledger_id
    @property
    def seq_no(self) -> int: return self._seq_no
    @property
    def identifier(self) -> str: return self._identifier

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": {
                "type": ProtocolConstants.TXN_GET_TXN,
                "data": self._seq_no,
                "ledgerId": self._ledger_id,
            },
            "identifier": self._identifier,
            "reqId": self._req_id,
            "protocolVersion": ProtocolConstants.PROTOCOL_VERSION,
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")
