# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from typing import Any, List
from fastapi import APIRouter, Depends, Path
from app.api.deps import get_owner_service
from app.schemas.owner import OwnerCreateIn, OwnerOut
from app.services.owner_service import OwnerService

"""
Endpoints de donos (Owner).


- `POST /owners` cria; `GET /owners` lista; `GET /owners/{owner_id}` detalha.
"""

router = APIRouter()

@router.post("", response_model=OwnerOut, status_code=201, summary="Criar dono")
async def create_owner(
    payload: OwnerCreateIn,
    owners: OwnerService = Depends(get_owner_service),
) -> dict[str, Any]:
    return await owners.create(payload)


@router.get("", response_model=List[OwnerOut], summary="Listar donos")
async def list_owners(owners: OwnerService = Depends(get_owner_service)) -> List[dict[str, Any]]:
    return await owners.find_all()


@router.get("/{owner_id}", response_model=OwnerOut, summary="Detalhar um dono por id")
async def get_owner(
    owner_id: str = Path(..., description="id (ObjectId) do dono"),
    owners: OwnerService = Depends(get_owner_service),
) -> dict[str, Any]:
    return await owners.find_one(owner_id)
