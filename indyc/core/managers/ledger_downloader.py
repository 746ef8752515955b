# indyc/core/managers/ledger_downloader.py
'''
class LedgerDownloader:
    Recorre un ledger pidiendo seqNo = 1, 2, ... hasta el límite o hasta que el
    validador responda 'data': null (no hay más transacciones).
    Cualquier otra respuesta terminal (REJECT, REPLY sin 'data'...) aborta el recorrido.

    Methods::
        iter_results(ledger, limit) -> Iterator[Any]:
            Produce los 'result' de cada respuesta en orden ascendente.
        download(ledger, limit, out) -> int:
            Escribe un array JSON con los resultados y retorna cuántos se escribieron.
'''

import json
import logging
from typing import Any, Iterator, Optional, TextIO

from indyc.core.config.protocol_constants import ProtocolConstants
from indyc.core.errors import ProtocolViolationError, UnexpectedReplyError
from indyc.core.interfaces.i_ledger_reader import ILedgerReader

logger = logging.getLogger(__name__)

class LedgerDownloader:

    def __init__(self, reader: ILedgerReader) -> None:
        self._reader = reader

    def iter_results(self, ledger: int, limit: Optional[int] = None) -> Iterator[Any]:
        seq_no = 1
        while limit is None or seq_no <= limit:
            logger.info(f"📥 Solicitando transacción {seq_no} del ledger {ledger}")
            reply = self._reader.get_transaction(ledger, seq_no)

            # REJECT, REQNACK...: el validador no respondió a la lectura
            if reply.op != ProtocolConstants.OP_REPLY:
                logger.error(f"❌ Respuesta '{reply.op}' para seqNo {seq_no} del ledger {ledger}")
                raise UnexpectedReplyError(reply.op)

            if reply.is_end_of_ledger:
                logger.info(f"🏁 Última transacción encontrada (seqNo {seq_no - 1}).")
                return

            if not reply.has_data:
                logger.error(f"❌ REPLY sin 'result.data' para seqNo {seq_no}: {reply.result!r}")
                raise ProtocolViolationError(f"REPLY sin 'result.data' para seqNo {seq_no}")

            yield reply.result
            seq_no += 1

    def download(self, ledger: int, limit: Optional[int], out: TextIO) -> int:
        count = 0
        out.write("[")
        for result in self.iter_results(ledger, limit):
            if count:
                out.write(",")
            out.write("\n")
            out.write(json.dumps(result))
            out.flush()
            count += 1
        out.write("\n]\n")
        out.flush()
        return count
