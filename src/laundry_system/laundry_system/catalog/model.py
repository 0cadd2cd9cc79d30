from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LaundryService:
    """A catalog offering; price is per kg, duration in days."""

    service_id: int
    name: str
    description: str
    price: int
    duration_days: int
