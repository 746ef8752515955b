import os
import sys
import json
import argparse
import logging

from typing import Any, Optional

# =========================================================
# ⚡ CONFIGURACIÓN INICIAL DEL SISTEMA
# =========================================================

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

import logger_config

from indyc.core.config.config_manager import ConfigManager
from indyc.core.errors import ConfigurationError, IndyClientError
from indyc.core.factories.pool_factory import Pool, PoolFactory
from indyc.core.managers.ledger_downloader import LedgerDownloader
from indyc.core.models.ledger_id import LedgerId

logger = logging.getLogger("indyc.cli")

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_config(config_path: str) -> dict[str, Any]:
    """Carga el archivo JSON de configuración (secciones 'network' y 'pool')."""
    if not os.path.exists(config_path):
        raise ConfigurationError(f"No existe el archivo de configuración: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"JSON corrupto en {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"No se pudo leer {config_path}: {e}") from e

def build_pool(genesis: Optional[str], pool_name: Optional[str]) -> Pool:
    """Génesis explícito > pool con nombre > configuración del entorno."""
    if genesis:
        return PoolFactory.from_file(genesis)
    if pool_name:
        return PoolFactory.from_pool_name(pool_name)
    return PoolFactory.from_config()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Descarga transacciones de un ledger Indy/Sovrin")

    parser.add_argument("--ledger", type=int, default=int(LedgerId.POOL),
                        help="Ledger a descargar (por defecto 0, el pool ledger)")
    parser.add_argument("--limit", type=int, default=10, help="Cuántas transacciones descargar")
    parser.add_argument("--all", action="store_true", help="Descargar todo, sin límite")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--genesis", type=str, help="Ruta al archivo de transacciones génesis")
    source.add_argument("--pool", type=str, help="Nombre del pool (config/genesis/<pool>.txn)")

    parser.add_argument("--config", type=str, help="Archivo JSON con overrides de red y pool")
    parser.add_argument("--verbose", action="store_true", help="Progreso detallado en stderr")
    return parser

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    logger_config.setup_logging(verbose=args.verbose)

    limit = None if args.all else args.limit

    try:
        if args.config:
            ConfigManager().load_from_json_dict(load_config(args.config))

        with build_pool(args.genesis, args.pool) as pool:
            downloader = LedgerDownloader(pool)
            total = downloader.download(args.ledger, limit, sys.stdout)
    except IndyClientError as e:
        logger.critical(f"❌ Error fatal: {e}")
        return 1

    print(f"✅ {total} transacciones descargadas.", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
