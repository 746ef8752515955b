# indyc/core/services/request_id_generator.py

import threading
from typing import Optional

class RequestIdGenerator:
    """
    Fuente de identificadores de correlación (reqId).
    Monótona y sin repeticiones dentro del proceso; segura entre hilos.
    """

    _shared: Optional['RequestIdGenerator'] = None
    _shared_lock = threading.Lock()

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    @classmethod
    def shared(cls) -> 'RequestIdGenerator':
        """Instancia compartida por todo el proceso."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def next_id(self) -> int:
        # El lock solo cubre el incremento
        with self._lock:
            current = self._next
            self._next += 1
        return current

    def peek(self) -> int:
        with self._lock:
            return self._next
