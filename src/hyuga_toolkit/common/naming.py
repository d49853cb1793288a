"""
Random display names for new projects ("adjective-noun", in Spanish).
"""
from __future__ import annotations

import random
from typing import Optional, Sequence

ADJECTIVES: tuple[str, ...] = (
    "alegre", "amable", "antiguo", "azul", "brillante", "callado", "claro",
    "dorado", "dulce", "fresco", "grande", "ligero", "lindo", "nuevo",
    "rapido", "sereno", "suave", "tranquilo", "valiente", "verde",
)

NOUNS: tuple[str, ...] = (
    "arbol", "barco", "camino", "cielo", "faro", "jardin", "lago", "libro",
    "lucero", "mar", "monte", "nube", "puente", "rio", "sol", "sendero",
    "tesoro", "valle", "viento", "volcan",
)


def generate_display_name(
    rng: Optional[random.Random] = None,
    *,
    adjectives: Sequence[str] = ADJECTIVES,
    nouns: Sequence[str] = NOUNS,
) -> str:
    """
    Generate a display name such as "sereno-faro".

    Args:
        rng: Random source (module-level random when None)
        adjectives: Word list for the first half
        nouns: Word list for the second half
    """
    rng = rng or random
    return f"{rng.choice(adjectives)}-{rng.choice(nouns)}"
