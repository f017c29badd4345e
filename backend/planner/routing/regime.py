"""Distance-regime classification."""

from backend.planner.models.common import Regime

LONG_DISTANCE_KM = 100
MEDIUM_DISTANCE_KM = 10


def classify_regime(distance_km: float) -> Regime:
    """Bucket a trip distance into short / medium / long.

    Boundary values belong to the lower regime: exactly 100 km is medium,
    exactly 10 km is short.
    """
    if distance_km > LONG_DISTANCE_KM:
        return Regime.long
    if distance_km > MEDIUM_DISTANCE_KM:
        return Regime.medium
    return Regime.short
