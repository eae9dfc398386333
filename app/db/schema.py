# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
from app.utils.inflection import pluralize

"""
Descritores estáticos dos registros persistidos (substituem decorators/reflection).


- `FieldSpec` descreve um campo (tipo, obrigatório, repetível, referência).
- `RecordSchema` agrupa campos e deriva o nome da coleção (minúsculo + plural).
- `CAT_SCHEMA` e `OWNER_SCHEMA` são os registros da aplicação.
"""


@dataclass(frozen=True)
class FieldSpec:
    """
    Descrição de um campo. `type`/`required` são apenas descritivos:
    a validação fica nos DTOs (`app/schemas`), o storage não os verifica.
    """
    name: str
    type: Any
    required: bool = True
    many: bool = False
    ref: Optional[str] = None  # nome do RecordSchema referenciado (guarda só o id)


@dataclass(frozen=True)
class RecordSchema:
    name: str
    fields: Tuple[FieldSpec, ...]

    @property
    def collection_name(self) -> str:
        """`Cat` -> `cats`, `Owner` -> `owners`."""
        return pluralize(self.name.lower())

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def ref_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.ref)

    def pick(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Mantém apenas os campos declarados, descartando valores ausentes/None.
        Não valida tipos nem obrigatoriedade (isso é papel dos DTOs).
        """
        return {k: data[k] for k in self.field_names if data.get(k) is not None}


OWNER_SCHEMA = RecordSchema(
    name="Owner",
    fields=(
        FieldSpec("name", str),
    ),
)

CAT_SCHEMA = RecordSchema(
    name="Cat",
    fields=(
        FieldSpec("name", str),
        FieldSpec("age", float),
        FieldSpec("breed", str),
        FieldSpec("tags", str, required=False, many=True),
        FieldSpec("owner", str, required=False, ref=OWNER_SCHEMA.name),
    ),
)
