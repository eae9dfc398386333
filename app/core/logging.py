# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import logging
import sys

"""
Configuração de logging da aplicação.


- `setup_logging(level)` configura o root logger (stdout, formato único).
- Silencia loggers ruidosos do driver/servidor.
"""

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

NOISY_LOGGERS = ("pymongo", "watchfiles", "watchfiles.main")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
