# indyc/core/utils/key_converter.py
'''
class KeyConverter:
    Deriva las claves de transporte CurveZMQ a partir de las claves de firma del ledger.

    Methods::
        ed25519_to_curve25519(public_key) -> bytes:
            Mapa birracional Edwards -> Montgomery: u = (1 + y) / (1 - y) mod p.
        verkey_to_curve25519(verkey) -> bytes:
            Decodifica una verkey base58 y la convierte.
        generate_curve_keypair() -> (bytes, bytes):
            Par efímero X25519 (público, secreto) codificado en Z85.
        z85_encode(raw) -> bytes:
            Codificación Z85 de una clave de 32 bytes.
'''

import logging
from typing import Tuple

import base58
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.serialization import (
    Encoding, NoEncryption, PrivateFormat, PublicFormat
)
from zmq.utils import z85

from indyc.core.config.protocol_constants import ProtocolConstants
from indyc.core.errors import KeyConversionError

logger = logging.getLogger(__name__)

class KeyConverter:

    # Primo del cuerpo de Curve25519
    CURVE25519_P: int = 2**255 - 19
    KEY_SIZE: int = ProtocolConstants.CURVE_KEY_SIZE

    @staticmethod
    def ed25519_to_curve25519(public_key: bytes) -> bytes:
        """
        Convierte una clave pública Ed25519 en la clave pública Curve25519 equivalente.

        La clave Ed25519 es la coordenada y en little-endian, con el bit más
        significativo reservado para el signo de x (se descarta: el mapa solo usa y).
        """
        if not isinstance(public_key, (bytes, bytearray)):
            raise KeyConversionError(f"Tipo de clave no soportado: {type(public_key)}")
        if len(public_key) != KeyConverter.KEY_SIZE:
            raise KeyConversionError(
                f"Longitud de clave inválida: {len(public_key)} bytes (se esperaban {KeyConverter.KEY_SIZE})"
            )

        p = KeyConverter.CURVE25519_P

        # 1. Coordenada y (limpiando el bit de signo)
        y_bytes = bytearray(public_key)
        y_bytes[-1] &= 0b0111_1111
        y = int.from_bytes(bytes(y_bytes), "little")

        # 2. u = (1 + y) / (1 - y) mod p
        denominator = (1 - y) % p
        if denominator == 0:
            raise KeyConversionError("Clave degenerada: (1 - y) no tiene inverso módulo p.")
        u = (1 + y) * pow(denominator, -1, p) % p

        # 3. Serialización little-endian de ancho fijo (relleno con ceros)
        return u.to_bytes(KeyConverter.KEY_SIZE, "little")

    @staticmethod
    def verkey_to_curve25519(verkey: str) -> bytes:
        """Deriva la clave de servidor CURVE de un validador desde su verkey base58."""
        try:
            raw = base58.b58decode(verkey)
        except ValueError as e:
            raise KeyConversionError(f"Verkey base58 inválida: {verkey!r}") from e

        return KeyConverter.ed25519_to_curve25519(raw)

    @staticmethod
    def generate_curve_keypair() -> Tuple[bytes, bytes]:
        """Genera un par X25519 efímero (una conexión, nunca persistido)."""
        private_key = X25519PrivateKey.generate()

        secret = private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
        public = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

        return KeyConverter.z85_encode(public), KeyConverter.z85_encode(secret)

    @staticmethod
    def z85_encode(raw: bytes) -> bytes:
        if len(raw) != KeyConverter.KEY_SIZE:
            raise KeyConversionError(f"Clave de {len(raw)} bytes no codificable como clave CURVE.")
        return z85.encode(raw)
