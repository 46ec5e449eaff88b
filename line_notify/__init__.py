"""
LINE Notify 연동 클라이언트
"""

from line_notify.client import NotifyClient
from line_notify.config import Settings, get_settings
from line_notify.models.profile import UserProfile
from line_notify.services.errors import (
    BulkOperationError,
    InvalidInputError,
    LineNotifyError,
    RemoteError,
    RequestTimeoutError,
)

__all__ = [
    "NotifyClient",
    "Settings",
    "get_settings",
    "UserProfile",
    "LineNotifyError",
    "InvalidInputError",
    "RemoteError",
    "RequestTimeoutError",
    "BulkOperationError",
]
