# indyc/core/models/reply.py

import json
from typing import Dict, Any, Union

from indyc.core.config.protocol_constants import ProtocolConstants

class Reply:
    """
    Mensaje de respuesta de un validador (REQACK, REPLY u otro).
    'result' queda como estructura opaca: su interpretación es del llamador.
    """

    def __init__(self, identifier: str, op: str, req_id: int, result: Any = None) -> None:
        self._identifier = identifier
        self._op = op
        self._req_id = req_id
        self._result = result

    @property
    def identifier(self) -> str: return self._identifier
    @property
    def op(self) -> str: return self._op
    @property
    def req_id(self) -> int: return self._req_id
    @property
    def result(self) -> Any: return self._result

    @property
    def data(self) -> Any:
        if isinstance(self._result, dict):
            return self._result.get("data")
        return None

    @property
    def has_data(self) -> bool:
        """False cuando el ledger responde 'data': null (no existe la transacción)."""
        return self.data is not None

    @property
    def is_end_of_ledger(self) -> bool:
        """REPLY cuyo 'result' trae la clave 'data' con valor null: no hay más transacciones."""
        return (
            self._op == ProtocolConstants.OP_REPLY
            and isinstance(self._result, dict)
            and "data" in self._result
            and self._result["data"] is None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self._identifier,
            "op": self._op,
            "reqId": self._req_id,
            "result": self._result,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Reply':
        """Reconstruye la respuesta validando la forma mínima (op texto, reqId entero)."""
        if not isinstance(data, dict):
            raise ValueError("La respuesta no es un objeto JSON.")

        op = data.get("op")
        if not isinstance(op, str):
            raise ValueError("Campo 'op' ausente o inválido.")

        req_id = data.get("reqId")
        # bool es subclase de int: lo excluimos explícitamente
        if not isinstance(req_id, int) or isinstance(req_id, bool):
            raise ValueError("Campo 'reqId' ausente o inválido.")

        identifier = data.get("identifier")
        return Reply(
            identifier=identifier if isinstance(identifier, str) else "",
            op=op,
            req_id=req_id,
            result=data.get("result"),
        )

    @staticmethod
    def from_json(raw: Union[str, bytes]) -> 'Reply':
        return Reply.from_dict(json.loads(raw))

    def __repr__(self) -> str:
        return f"Reply(op={self._op!r}, req_id={self._req_id}, identifier={self._identifier!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reply):
            return NotImplemented
        return self.to_dict() == other.to_dict()
