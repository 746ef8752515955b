# indyc/core/models/ledger_id.py

from enum import IntEnum

class LedgerId(IntEnum):
    """Identificadores de los ledgers mantenidos por los validadores."""
    POOL = 0
    DOMAIN = 1
    CONFIG = 2
    AUDIT = 3
