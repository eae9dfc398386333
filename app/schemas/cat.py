# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import List, Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field, StrictFloat, StrictInt

"""
Schemas (DTOs) de gatos.


- `CatCreateIn`: campos do registro sem id/timestamps.
- `CatUpdateIn`: mesmos campos, todos opcionais (update parcial).
- `CatOut`: registro persistido (id gerado + timestamps).
"""

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

class CatCreateIn(BaseModel):
    name: str
    age: Union[StrictInt, StrictFloat]
    breed: str
    tags: List[str] = Field(default_factory=list)
    owner: Optional[str] = Field(None, pattern=OBJECT_ID_PATTERN, description="id do Owner (referência)")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Tom",
                "age": 3,
                "breed": "Tabby",
                "tags": ["indoor"],
                "owner": None,
            }
        }
    }

class CatUpdateIn(BaseModel):
    name: Optional[str] = None
    age: Optional[Union[StrictInt, StrictFloat]] = None
    breed: Optional[str] = None
    tags: Optional[List[str]] = None
    owner: Optional[str] = Field(None, pattern=OBJECT_ID_PATTERN)

class CatOut(BaseModel):
    id: str
    name: str
    age: Union[int, float]
    breed: str
    tags: List[str] = Field(default_factory=list)
    owner: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
