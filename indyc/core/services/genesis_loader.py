# indyc/core/services/genesis_loader.py
'''
class GenesisLoader:
    Lee las transacciones génesis del pool (un objeto JSON por bloque) y extrae
    la lista ordenada de validadores (alias, verkey, client_ip:client_port).

    Methods::
        load(stream) -> List[Validator]:
            Recorre el flujo hasta EOF (objetos por línea, concatenados o con sangría).
            Los bloques corruptos se registran y se omiten.
        load_file(path) -> List[Validator]:
            Abre el archivo génesis y delega en load().
'''

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from indyc.core.config.protocol_constants import ProtocolConstants
from indyc.core.errors import ConfigurationError
from indyc.core.models.validator import Validator, join_host_port

logger = logging.getLogger(__name__)

class GenesisLoader:

    def __init__(self) -> None:
        self._decoder = json.JSONDecoder()
        self._skipped = 0

    @property
    def skipped(self) -> int:
        """Bloques corruptos descartados en la última carga."""
        return self._skipped

    def load(self, stream: Iterable[Union[str, bytes]]) -> List[Validator]:
        self._skipped = 0
        validators: List[Validator] = []

        for index, block in enumerate(self._iter_blocks(stream)):
            try:
                validator = self._to_validator(block)
            except (KeyError, TypeError, ValueError) as e:
                self._skipped += 1
                logger.warning(f"🗑️ Génesis: bloque #{index} corrupto, se omite ({type(e).__name__}: {e})")
                continue

            if validator is not None:
                validators.append(validator)

        logger.info(f"🌌 Génesis cargado: {len(validators)} validadores ({self._skipped} bloques omitidos).")
        return validators

    def load_file(self, path: Union[str, Path]) -> List[Validator]:
        genesis_path = Path(path)
        if not genesis_path.is_file():
            raise ConfigurationError(f"No existe el archivo génesis: {genesis_path}")

        with open(genesis_path, "r", encoding="utf-8") as f:
            return self.load(f)

    # --- Internals ---

    def _iter_blocks(self, stream: Iterable[Union[str, bytes]]) -> Iterator[Any]:
        """
        Produce cada objeto JSON del flujo, delimitado por saltos de línea o concatenado.
        Un objeto puede ocupar varias líneas (génesis con sangría).
        Ante JSON corrupto se descarta el bloque y la lectura se reanuda en la
        siguiente línea que empiece por '{'.
        """
        text = "".join(self._iter_text(stream))
        pos = self._skip_whitespace(text, 0)

        while pos < len(text):
            try:
                block, end = self._decoder.raw_decode(text, pos)
            except json.JSONDecodeError as e:
                self._skipped += 1
                logger.warning(f"🗑️ Génesis: JSON corrupto, se omite ({e.msg}, línea {e.lineno} col {e.colno})")

                resume = text.find("\n{", pos)
                if resume < 0:
                    return
                pos = resume + 1
                continue

            yield block
            pos = self._skip_whitespace(text, end)

    def _iter_text(self, stream: Iterable[Union[str, bytes]]) -> Iterator[str]:
        for chunk in stream:
            if isinstance(chunk, bytes):
                try:
                    yield chunk.decode("utf-8")
                except UnicodeDecodeError:
                    self._skipped += 1
                    logger.warning("🗑️ Génesis: línea no UTF-8, se omite.")
            else:
                yield chunk

    @staticmethod
    def _skip_whitespace(text: str, pos: int) -> int:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        return pos

    def _to_validator(self, block: Dict[str, Any]) -> Optional[Validator]:
        txn = block["txn"]
        txn_type = str(txn["type"])

        if txn_type != ProtocolConstants.TXN_NODE:
            logger.debug(f"Génesis: transacción tipo {txn_type} ignorada.")
            return None

        data = txn["data"]
        node = data["data"]

        verkey = data["dest"]
        if not isinstance(verkey, str) or not verkey:
            raise ValueError("Campo 'dest' vacío o inválido.")

        alias = node["alias"]
        client_ip = node["client_ip"]
        if not isinstance(client_ip, str) or not client_ip:
            raise ValueError("Campo 'client_ip' vacío o inválido.")

        # El puerto puede venir como texto ("9702") o como entero; nunca decimal
        raw_port = node["client_port"]
        if isinstance(raw_port, bool) or not isinstance(raw_port, (int, str)):
            raise ValueError(f"Puerto inválido: {raw_port!r}")
        client_port = int(raw_port)
        if not 0 < client_port < 65536:
            raise ValueError(f"Puerto fuera de rango: {client_port}")

        return Validator(
            alias=str(alias),
            verkey=verkey,
            address=join_host_port(client_ip, client_port),
        )
