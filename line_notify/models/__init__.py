# Pydantic Models
from line_notify.models.profile import UserProfile

__all__ = ["UserProfile"]
