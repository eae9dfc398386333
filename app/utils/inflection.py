# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations

"""
Pluralização simples (inglês) para nomes de coleções.


- `pluralize("cat")` -> "cats", `pluralize("box")` -> "boxes", `pluralize("puppy")` -> "puppies".
- Palavras incontáveis (ex.: "fish", "sheep") retornam inalteradas.
"""

UNCOUNTABLE = frozenset({
    "equipment", "information", "rice", "money", "species", "series",
    "fish", "sheep", "moose", "deer", "news", "data",
})

IRREGULAR: dict[str, str] = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "mouse": "mice",
    "goose": "geese",
    "ox": "oxen",
}

# -f/-fe que viram -ves
_VES = {"leaf", "wolf", "calf", "half", "knife", "life", "wife", "shelf", "loaf", "thief"}

_VOWELS = set("aeiou")


def pluralize(word: str) -> str:
    w = word.strip()
    if not w:
        raise ValueError("word must not be empty")

    lower = w.lower()
    if lower in UNCOUNTABLE:
        return w
    if lower in IRREGULAR:
        return IRREGULAR[lower]
    if lower in _VES:
        return w[:-2] + "ves" if lower.endswith("fe") else w[:-1] + "ves"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return w + "es"
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return w[:-1] + "ies"
    return w + "s"
