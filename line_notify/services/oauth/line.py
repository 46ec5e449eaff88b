"""
LINE Notify OAuth 서비스
https://notify-bot.line.me/doc/en/
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from line_notify.config import Settings, get_settings
from line_notify.services.errors import InvalidInputError, RemoteError
from line_notify.services.http import (
    ClientFactory,
    default_client_factory,
    is_success,
    json_field,
    send_request,
)
from line_notify.services.oauth.base import BaseOAuthService

logger = logging.getLogger(__name__)


class LineOAuthService(BaseOAuthService):
    """LINE Notify OAuth 서비스"""

    AUTHORIZE_URL = "https://notify-bot.line.me/oauth/authorize"
    TOKEN_URL = "https://notify-bot.line.me/oauth/token"
    STATUS_URL = "https://notify-api.line.me/api/status"

    # LINE Notify는 state 검증을 하지 않으므로 고정값 사용
    STATE = "NO_STATE"
    SCOPE = "notify"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = default_client_factory,
    ) -> None:
        self.settings = settings or get_settings()
        self.client_factory = client_factory

    @property
    def provider_name(self) -> str:
        return "line_notify"

    @property
    def timeout(self) -> float:
        return self.settings.line_notify_timeout_seconds

    def build_authorization_url(self) -> str:
        """LINE Notify 연동 인증 URL 생성"""
        params = {
            "response_type": "code",
            "client_id": self.settings.line_notify_client_id,
            "redirect_uri": self.settings.line_notify_callback_url,
            "scope": self.SCOPE,
            "state": self.STATE,
        }
        return f"{self.AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code_for_token(self, code: Optional[str], *, strict: bool = False) -> Optional[str]:
        """
        인증 코드로 액세스 토큰 교환

        Args:
            code: 인증 후 redirect로 전달된 code
            strict: True면 code가 비었을 때 InvalidInputError 발생

        Returns:
            access token (응답에 access_token 필드가 없으면 None)

        Raises:
            InvalidInputError: strict 모드에서 code가 비어 있음
            RemoteError: 2xx가 아닌 응답
        """
        if not code:
            if strict:
                raise InvalidInputError("authorization code is required")
            return None

        response = await send_request(
            self.client_factory,
            "POST",
            self.TOKEN_URL,
            timeout=self.timeout,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.settings.line_notify_callback_url,
                "client_id": self.settings.line_notify_client_id,
                "client_secret": self.settings.line_notify_client_secret,
            },
        )
        if not is_success(response):
            logger.warning(f"LINE Notify 토큰 교환 실패: {response.status_code}")
            raise RemoteError(
                f"token exchange failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        return json_field(response, "access_token")

    async def resolve_identity(self, token: Optional[str]) -> Optional[str]:
        """
        access token으로 알림 대상 이름 조회

        2xx가 아닌 응답은 예외 없이 None을 돌려준다.
        """
        if not token:
            return None

        response = await send_request(
            self.client_factory,
            "GET",
            self.STATUS_URL,
            timeout=self.timeout,
            token=token,
        )
        if not is_success(response):
            logger.info(f"LINE Notify 상태 조회 실패: {response.status_code}")
            return None

        return json_field(response, "target")
