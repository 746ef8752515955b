# indyc/core/config/network_config.py

import os
from typing import Dict, Any, Optional

class NetworkConfig:
    """
    Configuración específica para la capa de transporte (ZeroMQ + CURVE).
    Aisla los detalles de infraestructura (reintentos, timeouts) de la lógica del protocolo.
    """
    def __init__(self) -> None:
        # Valores por defecto desde Variables de Entorno
        self._max_connect_attempts: int = int(os.getenv("INDYC_MAX_CONNECT_ATTEMPTS", 3))

        # -1 = recepción bloqueante sin límite
        self._recv_timeout_ms: int = int(os.getenv("INDYC_RECV_TIMEOUT_MS", -1))
        self._linger_ms: int = int(os.getenv("INDYC_LINGER_MS", 0))

    # --- Getters Públicos (Solo Lectura) ---
    @property
    def max_connect_attempts(self) -> int: return self._max_connect_attempts
    @property
    def recv_timeout_ms(self) -> int: return self._recv_timeout_ms
    @property
    def linger_ms(self) -> int: return self._linger_ms

    @property
    def recv_timeout(self) -> Optional[int]:
        return self._recv_timeout_ms if self._recv_timeout_ms >= 0 else None

    # --- Método de Actualización Controlada ---
    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Inyecta configuración externa (JSON) respetando el encapsulamiento.
        """
        if not data: return

        if "max_connect_attempts" in data:
            attempts = int(data["max_connect_attempts"])
            if attempts < 1:
                raise ValueError("max_connect_attempts debe ser >= 1")
            self._max_connect_attempts = attempts

        if "recv_timeout_ms" in data:
            self._recv_timeout_ms = int(data["recv_timeout_ms"])

        if "linger_ms" in data:
            self._linger_ms = int(data["linger_ms"])
