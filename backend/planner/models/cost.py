"""Cost breakdown models (KRW, no decimal subunits)."""

from pydantic import BaseModel


class TransportationCost(BaseModel):
    """Fares by transit mode."""

    bus: int
    subway: int
    train: int
    taxi: int
    total: int


class FoodCost(BaseModel):
    """Meal spend."""

    breakfast: int
    lunch: int
    dinner: int
    snacks: int
    total: int


class ActivityCost(BaseModel):
    """Sightseeing spend."""

    admission: int
    experiences: int
    souvenirs: int
    total: int


class AccommodationCost(BaseModel):
    """Lodging spend for multi-day trips."""

    nights: int
    price_per_night: int
    total: int


class CostBreakdown(BaseModel):
    """Cost breakdown by category."""

    transportation: TransportationCost
    food: FoodCost
    activities: ActivityCost
    accommodation: AccommodationCost | None = None
    total: int
