# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

"""
Schemas (DTOs) de donos (Owner), referenciados por `Cat.owner`.
"""

class OwnerCreateIn(BaseModel):
    name: str = Field(..., min_length=1)

class OwnerOut(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
