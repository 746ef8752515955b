# indyc/core/config/config_manager.py
'''
class ConfigManager:
    Orquesta y centraliza el acceso a la configuración de todos los módulos (Red y Pool),
    cargando valores desde el entorno (.env incluido) o desde un diccionario JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Inicializa las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las sub-configuraciones.
'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

from indyc.core.config.network_config import NetworkConfig
from indyc.core.config.pool_config import PoolConfig
from indyc.core.errors import ConfigurationError

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._network = NetworkConfig()  # Transporte
        self._pool = PoolConfig()        # Génesis / validadores

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:
        try:
            if "network" in json_data:
                self._network.update_from_dict(json_data["network"])

            if "pool" in json_data:
                self._pool.update_from_dict(json_data["pool"])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Configuración JSON inválida: {e}") from e

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def pool(self) -> PoolConfig:
        return self._pool
