# indyc/core/models/did.py

from dataclasses import dataclass
from urllib.parse import urlparse

@dataclass(frozen=True)
class Did:
    """Identificador descentralizado del ledger Sovrin: did:sov:<id>"""
    method: str
    id: str

    def __str__(self) -> str:
        return f"did:{self.method}:{self.id}"

    @staticmethod
    def parse(did_str: str) -> 'Did':
        parsed = urlparse(did_str)
        if parsed.scheme != "did":
            raise ValueError("No es un DID")

        # did:sov:xxx -> path 'sov:xxx' (URI opaca, sin '//')
        opaque = parsed.path if not parsed.netloc else ""
        if not opaque:
            raise ValueError("No se encontró el método del DID")

        method, sep, ident = opaque.partition(":")
        if method != "sov":
            raise ValueError("No es un DID sov")
        if not sep or not ident:
            raise ValueError("No se encontró el ID del DID")

        return Did(method="sov", id=ident)
