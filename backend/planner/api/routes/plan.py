"""Current travel plan endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend.planner.api.deps import get_store
from backend.planner.models.travel import TravelPlan
from backend.planner.storage.history import TravelPlanStore
from backend.planner.storage.store import KeyValueStore

router = APIRouter(prefix="/api/plan", tags=["plan"])


def get_plan_store(store: Annotated[KeyValueStore, Depends(get_store)]) -> TravelPlanStore:
    return TravelPlanStore(store)


@router.get("", response_model=TravelPlan)
async def read_plan(plans: Annotated[TravelPlanStore, Depends(get_plan_store)]) -> TravelPlan:
    """Current travel plan."""
    plan = plans.load()
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No travel plan saved")
    return plan


@router.put("", response_model=TravelPlan)
async def save_plan(
    plan: TravelPlan,
    plans: Annotated[TravelPlanStore, Depends(get_plan_store)],
) -> TravelPlan:
    """Replace the current travel plan."""
    plans.save(plan)
    return plan


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(plans: Annotated[TravelPlanStore, Depends(get_plan_store)]) -> Response:
    """Forget the current travel plan."""
    plans.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
