# indyc/core/errors.py

class IndyClientError(Exception):
    """Raíz de los errores controlados del cliente."""
    pass

class ConfigurationError(IndyClientError):
    """Configuración inutilizable (pool vacío, génesis inexistente...)."""
    pass

class KeyConversionError(IndyClientError, ValueError):
    """Clave de verificación imposible de convertir. Nunca se sustituye por una clave vacía."""
    pass

class PoolConnectionError(IndyClientError):
    """No se pudo establecer conexión con ningún validador tras agotar los intentos."""
    pass

class RequestIOError(IndyClientError):
    """Fallo de E/S en el socket durante una petición (envío, recepción o timeout)."""
    pass

class ProtocolViolationError(IndyClientError):
    """
    La secuencia REQACK -> REPLY no se respetó.
    El estado de tramas de la conexión deja de ser confiable.
    """
    pass

class UnexpectedReplyError(ProtocolViolationError):
    """El primer mensaje no fue un REQACK."""

    def __init__(self, op: str) -> None:
        super().__init__(f"Operación de respuesta inesperada: {op}")
        self.op = op
