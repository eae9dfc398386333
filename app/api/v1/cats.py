# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Path
from app.api.deps import get_cat_service, get_owner_service
from app.schemas.cat import CatCreateIn, CatUpdateIn, CatOut
from app.schemas.owner import OwnerOut
from app.services.cat_service import CatService
from app.services.owner_service import OwnerService

"""
Endpoints de gatos.


- `POST /cats` cria; `GET /cats` lista tudo (sem filtro/paginação).
- `GET|PATCH|DELETE /cats/{cat_id}` operam sobre um gato (404 se não existir).
- `GET /cats/{cat_id}/owner` resolve a referência do dono (lookup separado).
"""

router = APIRouter()

@router.post("", response_model=CatOut, status_code=201, summary="Criar gato")
async def create_cat(
    payload: CatCreateIn,
    cats: CatService = Depends(get_cat_service),
) -> dict[str, Any]:
    return await cats.create(payload)


@router.get("", response_model=List[CatOut], summary="Listar gatos")
async def list_cats(cats: CatService = Depends(get_cat_service)) -> List[dict[str, Any]]:
    return await cats.find_all()


@router.get("/{cat_id}", response_model=CatOut, summary="Detalhar um gato por id")
async def get_cat(
    cat_id: str = Path(..., description="id (ObjectId) do gato"),
    cats: CatService = Depends(get_cat_service),
) -> dict[str, Any]:
    return await cats.find_one(cat_id)


@router.patch("/{cat_id}", response_model=CatOut, summary="Atualizar campos de um gato")
async def update_cat(
    payload: CatUpdateIn,
    cat_id: str = Path(..., description="id (ObjectId) do gato"),
    cats: CatService = Depends(get_cat_service),
) -> dict[str, Any]:
    return await cats.update(cat_id, payload)


@router.delete("/{cat_id}", response_model=CatOut, summary="Remover um gato")
async def delete_cat(
    cat_id: str = Path(..., description="id (ObjectId) do gato"),
    cats: CatService = Depends(get_cat_service),
) -> dict[str, Any]:
    return await cats.remove(cat_id)


@router.get("/{cat_id}/owner", response_model=OwnerOut, summary="Dono do gato")
async def get_cat_owner(
    cat_id: str = Path(..., description="id (ObjectId) do gato"),
    cats: CatService = Depends(get_cat_service),
    owners: OwnerService = Depends(get_owner_service),
) -> dict[str, Any]:
    cat = await cats.find_one(cat_id)
    if not cat.get("owner"):
        raise HTTPException(status_code=404, detail="Cat has no owner")
    return await owners.find_one(cat["owner"])
