# indyc/core/models/validator.py

from dataclasses import dataclass
from typing import Tuple

from indyc.core.config.protocol_constants import ProtocolConstants

@dataclass(frozen=True)
class Validator:
    """
    Nodo validador del pool, tal como aparece en las transacciones génesis.
    Inmutable: el orden de la lista del pool define la rotación de conexión.
    """
    alias: str
    verkey: str   # Clave de verificación Ed25519 en base58 (campo 'dest' del génesis)
    address: str  # client_ip:client_port

    def host_port(self) -> Tuple[str, int]:
        host, _, port = self.address.rpartition(":")
        return host.strip("[]"), int(port)

    @property
    def endpoint(self) -> str:
        return f"{ProtocolConstants.TRANSPORT_SCHEME}://{self.address}"


def join_host_port(host: str, port: int) -> str:
    """Une host y puerto; los literales IPv6 van entre corchetes."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"
