# indyc/infra/network/ledger_client.py

import logging
import threading
from typing import Any, List, Optional

import zmq

from indyc.core.config.protocol_constants import ProtocolConstants
from indyc.core.errors import ProtocolViolationError, RequestIOError, UnexpectedReplyError
from indyc.core.interfaces.i_connection_provider import IConnectionProvider
from indyc.core.interfaces.i_ledger_reader import ILedgerReader
from indyc.core.models.get_txn_request import GetTxnRequest
from indyc.core.models.reply import Reply
from indyc.core.services.request_id_generator import RequestIdGenerator

logger = logging.getLogger(__name__)

class LedgerClient(ILedgerReader):
    """
    Protocolo de lectura del ledger sobre la conexión CurveZMQ.

    Cada petición exige consumir exactamente dos mensajes, en orden:
    REQACK (acuse con el mismo reqId) y la respuesta terminal (REPLY).
    Solo una petición puede estar en vuelo por socket.
    """

    def __init__(
        self,
        connections: IConnectionProvider,
        id_generator: Optional[RequestIdGenerator] = None,
        identifier: str = ProtocolConstants.DEFAULT_IDENTIFIER
    ) -> None:
        self._connections = connections
        self._ids = id_generator or RequestIdGenerator.shared()
        self._identifier = identifier
        self._request_lock = threading.Lock()

    def get_transaction(self, ledger: int, seq_no: int) -> Reply:
        """
        Solicita la transacción 'seq_no' del ledger indicado.
        Un REPLY con result.data == null es una respuesta válida (no existe la transacción).
        """
        request = GetTxnRequest(
            req_id=self._ids.next_id(),
            ledger_id=ledger,
            seq_no=seq_no,
            identifier=self._identifier,
        )
        payload = request.to_json()

        with self._request_lock:
            sock = self._connections.get_connection()

            try:
                self._send(sock, payload)

                ack = self._receive_reply(sock)
                if ack.req_id != request.req_id:
                    raise ProtocolViolationError(
                        f"Respuesta a otra petición (reqId {ack.req_id}, se esperaba {request.req_id})"
                    )
                if ack.op != ProtocolConstants.OP_REQACK:
                    raise UnexpectedReplyError(ack.op)

                logger.debug(f"REQACK recibido para reqId={request.req_id}")

                return self._receive_reply(sock)

            except (ProtocolViolationError, RequestIOError) as e:
                # Consumo parcial: el socket queda en estado indefinido
                logger.error(f"❌ Petición reqId={request.req_id} abortada: {e}")
                self._connections.invalidate(f"{type(e).__name__}: {e}")
                raise

    # --- Internals ---

    def _send(self, sock: Any, payload: bytes) -> None:
        try:
            sock.send(payload, zmq.NOBLOCK)
        except zmq.ZMQError as e:
            raise RequestIOError(f"Error enviando la petición: {e}") from e

    def _receive_reply(self, sock: Any) -> Reply:
        frames = self._receive_frames(sock)
        if len(frames) != 1:
            raise ProtocolViolationError(f"Cantidad de tramas incorrecta: {len(frames)}")

        try:
            return Reply.from_json(frames[0])
        except (ValueError, UnicodeDecodeError) as e:
            # json.JSONDecodeError es subclase de ValueError
            raise ProtocolViolationError(f"Respuesta mal formada: {e}") from e

    def _receive_frames(self, sock: Any) -> List[bytes]:
        try:
            return sock.recv_multipart()
        except zmq.Again as e:
            raise RequestIOError("Timeout esperando respuesta del validador.") from e
        except zmq.ZMQError as e:
            raise RequestIOError(f"Error recibiendo respuesta: {e}") from e

