# indyc/core/config/pool_config.py

import os
from pathlib import Path
from typing import Dict, Any, Optional

from indyc.core.config.paths import Paths

class PoolConfig:
    """
    Configuración del Pool de validadores.
    Define de dónde se leen las transacciones génesis (archivo explícito o pool con nombre).
    """
    def __init__(self) -> None:
        self._pool_name: str = os.getenv("INDYC_POOL_NAME", "local")

        genesis_file = os.getenv("INDYC_GENESIS_FILE", "")
        self._genesis_file: Optional[Path] = Path(genesis_file) if genesis_file else None

        self._genesis_dir: Path = Path(os.getenv("INDYC_GENESIS_DIR", Paths.GENESIS_DIR))

    @property
    def pool_name(self) -> str: return self._pool_name
    @property
    def genesis_file(self) -> Optional[Path]: return self._genesis_file
    @property
    def genesis_dir(self) -> Path: return self._genesis_dir

    def genesis_path_for(self, pool_name: str) -> Path:
        """Ruta convencional del génesis de un pool con nombre: <genesis_dir>/<nombre>.txn"""
        return self._genesis_dir / f"{pool_name}.txn"

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if not data: return

        if "pool_name" in data:
            self._pool_name = str(data["pool_name"])

        if "genesis_file" in data and data["genesis_file"]:
            self._genesis_file = Path(data["genesis_file"])

        if "genesis_dir" in data:
            self._genesis_dir = Path(data["genesis_dir"])
