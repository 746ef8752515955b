# indyc/infra/network/connection_manager.py

import base64
import logging
import threading
from typing import Callable, List, Optional, Sequence, Tuple

import zmq

from indyc.core.config.network_config import NetworkConfig
from indyc.core.errors import ConfigurationError, KeyConversionError, PoolConnectionError
from indyc.core.interfaces.i_connection_provider import IConnectionProvider
from indyc.core.models.validator import Validator
from indyc.core.utils.key_converter import KeyConverter

logger = logging.getLogger(__name__)

KeypairFactory = Callable[[], Tuple[bytes, bytes]]

class ConnectionManager(IConnectionProvider):
    """
    Gestor de Transporte CurveZMQ hacia el pool de validadores.

    Responsabilidad (SRP): mantener como máximo UN socket DEALER cifrado, creado
    de forma perezosa y con rotación entre validadores cuando la conexión falla.
    No conoce nada sobre el protocolo de aplicación (REQACK/REPLY).
    """

    def __init__(
        self,
        validators: Sequence[Validator],
        config: Optional[NetworkConfig] = None,
        context: Optional[zmq.Context] = None,
        keypair_factory: KeypairFactory = KeyConverter.generate_curve_keypair
    ) -> None:
        self._validators: List[Validator] = list(validators)
        self._config = config or NetworkConfig()
        self._context = context or zmq.Context.instance()
        self._keypair_factory = keypair_factory

        # Estado Interno Protegido
        self._socket: Optional[zmq.Socket] = None
        self._active_validator: Optional[Validator] = None
        self._next_validator = 0
        self._lock = threading.RLock()

        logger.info(
            f"✅ ConnectionManager inicializado. Validadores={len(self._validators)}, "
            f"MaxIntentos={self._config.max_connect_attempts}"
        )

    # --- Propiedades Públicas (Encapsulamiento) ---

    @property
    def validators(self) -> List[Validator]:
        return list(self._validators)

    @property
    def max_connect_attempts(self) -> int:
        return self._config.max_connect_attempts

    @property
    def next_validator_index(self) -> int:
        with self._lock:
            return self._next_validator

    @property
    def active_validator(self) -> Optional[Validator]:
        with self._lock:
            return self._active_validator

    @property
    def is_connected(self) -> bool:
        with self._lock:
            return self._socket is not None

    # --- Gestión de Conexiones ---

    def get_connection(self) -> zmq.Socket:
        """Retorna el socket activo o establece uno nuevo rotando entre validadores."""
        with self._lock:
            if self._socket is not None:
                return self._socket

            if not self._validators:
                logger.error("❌ Pool sin validadores: revise el archivo génesis.")
                raise ConfigurationError("La lista de validadores está vacía.")

            last_error: Optional[Exception] = None
            for attempt in range(1, self._config.max_connect_attempts + 1):
                validator = self._validators[self._next_validator]
                self._next_validator = (self._next_validator + 1) % len(self._validators)

                try:
                    sock = self._new_connection(validator)
                except (zmq.ZMQError, KeyConversionError) as e:
                    last_error = e
                    logger.warning(
                        f"NET: Intento {attempt}/{self._config.max_connect_attempts} fallido "
                        f"con {validator.alias} ({validator.address}): {e}"
                    )
                    continue

                self._socket = sock
                self._active_validator = validator
                logger.info(f"🔗 Conexión CURVE establecida con {validator.alias} ({validator.address})")
                return sock

            logger.error(f"❌ Fallaron los {self._config.max_connect_attempts} intentos de conexión.")
            raise PoolConnectionError(
                f"No se pudo conectar con el pool tras {self._config.max_connect_attempts} intentos."
            ) from last_error

    def invalidate(self, reason: str) -> None:
        """Cierra y olvida el socket activo. La siguiente petición conectará de nuevo."""
        with self._lock:
            if self._socket is None:
                return
            alias = self._active_validator.alias if self._active_validator else "?"
            self._close_socket(self._socket)
            self._socket = None
            self._active_validator = None
            logger.info(f"💔 Conexión con {alias} descartada | Motivo: {reason}")

    def close(self) -> None:
        self.invalidate("Cierre del cliente")

    # --- Internals ---

    def _new_connection(self, validator: Validator) -> zmq.Socket:
        """Crea un socket DEALER con cifrado CURVE cliente->servidor hacia un validador."""
        # La clave del servidor se deriva antes de abrir el socket
        server_key = KeyConverter.z85_encode(KeyConverter.verkey_to_curve25519(validator.verkey))

        sock = self._context.socket(zmq.DEALER)
        try:
            # Par efímero: uno por conexión, jamás reutilizado
            public_key, secret_key = self._keypair_factory()

            sock.setsockopt(zmq.IDENTITY, base64.b64encode(public_key))
            sock.setsockopt(zmq.CURVE_PUBLICKEY, public_key)
            sock.setsockopt(zmq.CURVE_SECRETKEY, secret_key)
            sock.setsockopt(zmq.CURVE_SERVERKEY, server_key)
            sock.setsockopt(zmq.LINGER, self._config.linger_ms)

            if self._config.recv_timeout is not None:
                sock.setsockopt(zmq.RCVTIMEO, self._config.recv_timeout)

            sock.connect(validator.endpoint)
            return sock

        except Exception:
            self._close_socket(sock)
            raise

    def _close_socket(self, sock: zmq.Socket) -> None:
        try:
            sock.close(linger=0)
        except zmq.ZMQError as e:
            logger.warning(f"Error cerrando socket: {e}")
