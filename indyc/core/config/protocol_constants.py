# indyc/core/config/protocol_constants.py

from typing import Final

class ProtocolConstants:
    """
    Vocabulario inmutable del protocolo de nodos Indy (lectura de ledger).
    Centraliza:
    1. Identidad del cliente y versión del protocolo.
    2. Tipos de transacción (Génesis y Peticiones).
    3. Operaciones de respuesta de los validadores.
    """

    # ==========================================================================
    # 1. METADATOS GLOBALES
    # ==========================================================================
    PROTOCOL_VERSION: Final[int] = 2

    # Las lecturas no requieren firma: usamos un identificador fijo.
    DEFAULT_IDENTIFIER: Final[str] = "Go1ndyC1ient1111111111"

    # ==========================================================================
    # 2. TIPOS DE TRANSACCIÓN
    # ==========================================================================
    TXN_NODE: Final[str] = "0"
    TXN_GET_TXN: Final[str] = "3"

    # ==========================================================================
    # 3. OPERACIONES DE RESPUESTA
    # ==========================================================================
    OP_REQACK: Final[str] = "REQACK"
    OP_REPLY: Final[str] = "REPLY"

    # ==========================================================================
    # 4. TRANSPORTE
    # ==========================================================================
    TRANSPORT_SCHEME: Final[str] = "tcp"
    CURVE_KEY_SIZE: Final[int] = 32
