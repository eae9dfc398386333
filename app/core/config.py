# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

"""
Central de configurações (Settings) da Cats API.


- Carrega variáveis do .env (app/env/log/mongo/cors).
- Fornece defaults seguros e tipados via dataclass.
- Expõe `settings` como singleton para uso em toda a app.
"""

load_dotenv()

@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Cats API")
    APP_ENV: str = os.getenv("APP_ENV", "local")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))


    MONGODB_URL: str = os.getenv("MONGODB_URL", "mongodb://localhost:27017/nest")
    MONGODB_DB: Optional[str] = os.getenv("MONGODB_DB") or None
    MONGODB_MAX_POOL_SIZE: int = int(os.getenv("MONGODB_MAX_POOL_SIZE", "10"))
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000"))

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

settings = Settings()
