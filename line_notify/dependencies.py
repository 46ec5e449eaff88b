"""
의존성 제공 모듈
호스팅 애플리케이션(FastAPI Depends 등)에서 쓰는 싱글톤 인스턴스 제공
"""

from typing import Optional

from line_notify.client import NotifyClient
from line_notify.config import get_settings
from line_notify.services.notifications.line_notify import LineNotifyService
from line_notify.services.oauth.line import LineOAuthService

# 싱글톤 인스턴스
_notify_client: Optional[NotifyClient] = None


def get_notify_client() -> NotifyClient:
    """LINE Notify 클라이언트 싱글톤 반환"""
    global _notify_client
    if _notify_client is None:
        _notify_client = NotifyClient(get_settings())
    return _notify_client


def get_line_oauth_service() -> LineOAuthService:
    """LINE Notify OAuth 서비스 반환"""
    return get_notify_client().oauth


def get_line_notify_service() -> LineNotifyService:
    """LINE Notify 전송 서비스 반환"""
    return get_notify_client().notify


def reset_notify_client() -> None:
    """싱글톤과 캐싱된 설정 초기화 (테스트용)"""
    global _notify_client
    _notify_client = None
    get_settings.cache_clear()
