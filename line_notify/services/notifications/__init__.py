"""
알림 서비스 패키지
"""

from line_notify.services.notifications.line_notify import LineNotifyService

__all__ = ["LineNotifyService"]
