# logger_config.py
import logging
import os
import glob
import sys
from typing import List

from indyc.core.config.paths import Paths

def setup_logging(verbose: bool = False) -> str:
    # 1. Ruta: 'data/logs' (o INDYC_DATA_DIR/logs)
    Paths.ensure_directories_exist()
    log_dir = str(Paths.LOGS_DIR)

    # 2. Rotación de Archivos: Buscar el siguiente número (indyc_0.log, indyc_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "indyc_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            num = int(archivo.split('_')[-1].split('.')[0])
            indices.append(num)
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"indyc_{siguiente}.log")

    # 3. Configurar el Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Limpiamos handlers anteriores para evitar duplicados si se llama dos veces
    root_logger.handlers = []

    # --- CANAL 1: ARCHIVO (Todo el historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(logging.DEBUG if verbose else logging.INFO)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))

    # --- CANAL 2: STDERR ---
    # stdout queda reservado para la salida JSON.
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.INFO if verbose else logging.WARNING)
    ch.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    return nombre_archivo
