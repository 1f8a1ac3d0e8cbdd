"""FastAPI dependencies shared by the route modules."""
from fastapi import Depends

from .config import Settings, get_settings
from .store import BabyCareStorage, storage


def get_storage() -> BabyCareStorage:
    """Return the process-wide record store."""
    return storage


def get_current_user_id(settings: Settings = Depends(get_settings)) -> str:
    """Owner of every record written through the API.

    There is a single implicit caregiver, so this is always the configured
    default user; a ``userId`` supplied in a request body is never trusted.
    """
    return settings.default_user_id
