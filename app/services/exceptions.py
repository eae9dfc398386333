# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.

"""
Erros de domínio dos services (não-encontrado). Erros do storage não são traduzidos.
"""


class RecordNotFoundError(LookupError):
    """Registro inexistente (ou id malformado) na coleção."""

    def __init__(self, record_type: str, record_id: str):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(f"{record_type} not found: {record_id}")
