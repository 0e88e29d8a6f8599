from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class City:
    name: str
    is_launching: bool = False
    launch_date: Optional[str] = None


# launch metadata is display-only
CITIES = [
    City("Chilakaluripet"),
    City("Guntur", is_launching=True, launch_date="February 15th, 2025"),
    City("Narasarao Pet"),
    City("Vinukonda"),
]

CITY_NAMES = frozenset(c.name for c in CITIES)


def is_known_city(name: str | None) -> bool:
    return (name or "").strip() in CITY_NAMES
