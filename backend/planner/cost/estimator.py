"""Trip cost estimation from a route option, party size and trip length."""

import json
from pathlib import Path

from backend.planner.config import get_settings
from backend.planner.models.cost import (
    AccommodationCost,
    ActivityCost,
    CostBreakdown,
    FoodCost,
    TransportationCost,
)
from backend.planner.models.timeline import BusDetails, RouteOption, SubwayDetails, TrainDetails

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

# Per person per day (KRW)
BREAKFAST = 8000
LUNCH = 12000
DINNER = 15000
SNACKS = 5000

# Per person per trip (KRW)
ADMISSION = 10000
EXPERIENCES = 5000
SOUVENIRS = 20000

PRICE_PER_NIGHT = 80000


def calculate_route_cost(option: RouteOption) -> int:
    """Sum of fares over every bus, subway and train step."""
    return sum(
        step.details.fare
        for step in option.steps
        if isinstance(step.details, BusDetails | SubwayDetails | TrainDetails)
    )


def _fares_for(option: RouteOption, details_type: type) -> int:
    return sum(step.details.fare for step in option.steps if isinstance(step.details, details_type))


def _accommodation(duration_days: int, price_per_night: int) -> AccommodationCost | None:
    if duration_days <= 1:
        return None
    nights = duration_days - 1
    return AccommodationCost(nights=nights, price_per_night=price_per_night, total=price_per_night * nights)


def _mock_breakdown(participants: int, duration_days: int) -> CostBreakdown:
    """Fixture breakdown scaled to party size and trip length."""
    with open(FIXTURES_DIR / "cost_breakdown.json", encoding="utf-8") as f:
        data = json.load(f)

    transportation = TransportationCost(**data["transportation"])
    food = FoodCost(**data["food"])
    activities = ActivityCost(**data["activities"])

    transportation = transportation.model_copy(update={"total": transportation.total * participants})
    food = food.model_copy(update={"total": food.total * participants * duration_days})
    activities = activities.model_copy(update={"total": activities.total * participants})
    accommodation = _accommodation(duration_days, data["accommodation_per_night"])

    return CostBreakdown(
        transportation=transportation,
        food=food,
        activities=activities,
        accommodation=accommodation,
        total=(
            transportation.total
            + food.total
            + activities.total
            + (accommodation.total if accommodation else 0)
        ),
    )


def estimate_cost_breakdown(
    option: RouteOption,
    participants: int = 1,
    duration_days: int = 1,
    use_mock: bool | None = None,
) -> CostBreakdown:
    """Estimate categorized trip cost for a route option.

    Args:
        option: Selected route option
        participants: Party size (>= 1)
        duration_days: Trip length in days (>= 1); nights = days - 1
        use_mock: Use fixture figures (default: settings.use_mock_data)

    Returns:
        CostBreakdown in KRW

    Raises:
        ValueError: If participants or duration_days is below 1
    """
    if participants < 1:
        raise ValueError(f"participants must be >= 1, got {participants}")
    if duration_days < 1:
        raise ValueError(f"duration_days must be >= 1, got {duration_days}")

    if use_mock is None:
        use_mock = get_settings().use_mock_data
    if use_mock:
        return _mock_breakdown(participants, duration_days)

    person_days = participants * duration_days

    transportation = TransportationCost(
        bus=_fares_for(option, BusDetails) * participants,
        subway=_fares_for(option, SubwayDetails) * participants,
        train=_fares_for(option, TrainDetails) * participants,
        taxi=0,
        total=calculate_route_cost(option) * participants,
    )
    food = FoodCost(
        breakfast=BREAKFAST * person_days,
        lunch=LUNCH * person_days,
        dinner=DINNER * person_days,
        snacks=SNACKS * person_days,
        total=(BREAKFAST + LUNCH + DINNER + SNACKS) * person_days,
    )
    activities = ActivityCost(
        admission=ADMISSION * participants,
        experiences=EXPERIENCES * participants,
        souvenirs=SOUVENIRS * participants,
        total=(ADMISSION + EXPERIENCES + SOUVENIRS) * participants,
    )
    accommodation = _accommodation(duration_days, PRICE_PER_NIGHT)

    return CostBreakdown(
        transportation=transportation,
        food=food,
        activities=activities,
        accommodation=accommodation,
        total=(
            transportation.total
            + food.total
            + activities.total
            + (accommodation.total if accommodation else 0)
        ),
    )
