"""
Persistence of the last used exposure selection.
"""

from photo_assistant.session.preferences import (
    ExposurePreferences,
    load_preferences,
    preferences_from_state,
    restore_state,
    save_preferences,
    select_film,
)

__all__ = [
    "ExposurePreferences",
    "load_preferences",
    "preferences_from_state",
    "restore_state",
    "save_preferences",
    "select_film",
]
