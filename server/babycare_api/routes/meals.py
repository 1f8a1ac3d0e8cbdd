"""Meal plan API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ..dependencies import get_current_user_id, get_storage
from ..models.base import DATE_PATTERN
from ..models.meal import Meal, MealCreate, MealUpdate
from ..store import BabyCareStorage

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meals", tags=["Meals"])


@router.get("", response_model=list[Meal])
async def list_meals(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN, description="YYYY-MM-DD"),
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Get planned meals, newest first, optionally for a single day."""
    try:
        return db.meals.list(user_id, date=date)
    except Exception as exc:
        log.exception("Failed to fetch meals")
        raise HTTPException(status_code=500, detail="Failed to fetch meals") from exc


@router.post("", response_model=Meal)
async def create_meal(
    payload: MealCreate,
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    return db.meals.create(user_id, payload)


@router.put("/{meal_id}", response_model=Meal)
async def update_meal(
    meal_id: str,
    payload: MealUpdate,
    db: BabyCareStorage = Depends(get_storage),
):
    try:
        meal = db.meals.update(meal_id, payload.model_dump(exclude_unset=True))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail="Failed to update meal") from exc

    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal


@router.delete("/{meal_id}")
async def delete_meal(meal_id: str, db: BabyCareStorage = Depends(get_storage)):
    try:
        deleted = db.meals.delete(meal_id)
    except Exception as exc:
        log.exception("Failed to delete meal %s", meal_id)
        raise HTTPException(status_code=400, detail="Failed to delete meal") from exc

    if not deleted:
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"success": True}
