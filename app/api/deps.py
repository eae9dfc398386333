# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import Request
from pymongo.asynchronous.database import AsyncDatabase
from app.services.cat_service import CatService
from app.services.owner_service import OwnerService

"""
Dependências reutilizáveis da API.


- Services são criados uma única vez no lifespan (`app.state`) e injetados via `Depends`.
- `get_db()` injeta o `AsyncDatabase` (usado pelo health).
"""

def get_db(request: Request) -> AsyncDatabase:
    return request.app.state.db


def get_cat_service(request: Request) -> CatService:
    return request.app.state.cat_service


def get_owner_service(request: Request) -> OwnerService:
    return request.app.state.owner_service
