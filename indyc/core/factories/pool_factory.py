# indyc/core/factories/pool_factory.py

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from indyc.core.config.config_manager import ConfigManager
from indyc.core.errors import ConfigurationError
from indyc.core.interfaces.i_ledger_reader import ILedgerReader
from indyc.core.models.reply import Reply
from indyc.core.models.validator import Validator
from indyc.core.services.genesis_loader import GenesisLoader
from indyc.core.services.request_id_generator import RequestIdGenerator
from indyc.infra.network.connection_manager import ConnectionManager
from indyc.infra.network.ledger_client import LedgerClient

logger = logging.getLogger(__name__)

class Pool(ILedgerReader):
    """
    Fachada del pool: validadores del génesis + conexión perezosa + protocolo de lectura.
    El llamador es dueño del Pool (no hay singleton de conexión oculto).
    """

    def __init__(self, validators: List[Validator], connections: ConnectionManager, client: LedgerClient) -> None:
        self._validators = validators
        self._connections = connections
        self._client = client

    @property
    def validators(self) -> List[Validator]:
        return list(self._validators)

    @property
    def connections(self) -> ConnectionManager:
        return self._connections

    def get_transaction(self, ledger: int, seq_no: int) -> Reply:
        return self._client.get_transaction(ledger, seq_no)

    def close(self) -> None:
        self._connections.close()

    def __enter__(self) -> 'Pool':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class PoolFactory:
    """
    Fábrica Central del Pool.
    Encapsula el ensamblado: Génesis -> Validadores -> ConnectionManager -> LedgerClient.
    """

    @staticmethod
    def from_validators(validators: List[Validator], id_generator: Optional[RequestIdGenerator] = None) -> Pool:
        config = ConfigManager()
        connections = ConnectionManager(validators, config.network)
        client = LedgerClient(connections, id_generator)
        return Pool(validators, connections, client)

    @staticmethod
    def from_genesis(stream: Iterable[Union[str, bytes]], id_generator: Optional[RequestIdGenerator] = None) -> Pool:
        validators = GenesisLoader().load(stream)
        return PoolFactory.from_validators(validators, id_generator)

    @staticmethod
    def from_file(path: Union[str, Path], id_generator: Optional[RequestIdGenerator] = None) -> Pool:
        logger.info(f"🏭 PoolFactory: génesis desde {path}")
        validators = GenesisLoader().load_file(path)
        return PoolFactory.from_validators(validators, id_generator)

    @staticmethod
    def from_pool_name(name: str, id_generator: Optional[RequestIdGenerator] = None) -> Pool:
        """Resuelve un pool con nombre a <genesis_dir>/<nombre>.txn"""
        path = ConfigManager().pool.genesis_path_for(name)
        if not path.is_file():
            logger.critical(f"Pool desconocido: {name}")
            raise ConfigurationError(f"Pool no soportado: {name} (no existe {path})")
        return PoolFactory.from_file(path, id_generator)

    @staticmethod
    def from_config(id_generator: Optional[RequestIdGenerator] = None) -> Pool:
        """Génesis explícito (INDYC_GENESIS_FILE) o, en su defecto, el pool con nombre configurado."""
        pool_config = ConfigManager().pool
        if pool_config.genesis_file is not None:
            return PoolFactory.from_file(pool_config.genesis_file, id_generator)
        return PoolFactory.from_pool_name(pool_config.pool_name, id_generator)
