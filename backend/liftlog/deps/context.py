from datetime import date
from functools import lru_cache

from fastapi import Depends

from liftlog.calendar import today
from liftlog.preferences import JsonFileStore, Preferences
from liftlog.settings import Settings, get_settings

def get_today(settings: Settings = Depends(get_settings)) -> date:
    """Today as the lifter sees it (configured zone, not the server's)."""
    return today(settings.TIMEZONE)

@lru_cache
def _file_store(path: str) -> JsonFileStore:
    return JsonFileStore(path)

def get_preferences(settings: Settings = Depends(get_settings)) -> Preferences:
    return Preferences(_file_store(settings.PREFERENCES_PATH))
