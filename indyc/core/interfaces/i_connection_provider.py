# indyc/core/interfaces/i_connection_provider.py

from abc import ABC, abstractmethod
from typing import Any, Optional

from indyc.core.models.validator import Validator

class IConnectionProvider(ABC):
    """
    Contrato para el proveedor de la conexión cifrada con el pool.
    Desacopla el protocolo de petición/respuesta de la gestión de sockets.
    """

    @abstractmethod
    def get_connection(self) -> Any:
        """
        Retorna el socket activo; si no existe, lo establece (con rotación de validadores).
        Debe lanzar PoolConnectionError si se agotan los intentos.
        """
        pass

    @abstractmethod
    def invalidate(self, reason: str) -> None:
        """Descarta el socket activo: su estado de tramas ya no es confiable."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Cierra la conexión activa (apagado ordenado)."""
        pass

    @property
    @abstractmethod
    def active_validator(self) -> Optional[Validator]:
        """Validador al que está ligada la conexión activa."""
        pass
