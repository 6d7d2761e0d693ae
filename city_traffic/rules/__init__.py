"""Per-kind passability and steering rules."""

from .base import MovementRules, Neighbors
from .offroad import AtvRules, BicycleRules, HumanRules
from .road import CarRules, TaxiRules, TruckRules

__all__ = [
    "AtvRules",
    "BicycleRules",
    "CarRules",
    "HumanRules",
    "MovementRules",
    "Neighbors",
    "TaxiRules",
    "TruckRules",
]
