"""Current caregiver route."""
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_current_user_id, get_storage
from ..models.user import UserPublic
from ..store import BabyCareStorage

router = APIRouter(prefix="/api", tags=["User"])


@router.get("/user", response_model=UserPublic)
async def get_current_user(
    db: BabyCareStorage = Depends(get_storage),
    user_id: str = Depends(get_current_user_id),
):
    """Return the implicit caregiver account that owns every record."""
    user = db.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserPublic(id=user.id, username=user.username)
