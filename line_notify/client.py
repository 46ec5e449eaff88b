"""
LINE Notify 클라이언트
OAuth 연동(인증 URL, 토큰 교환, 사용자 조회)과 메시지 전송/연동 해제를 하나로 묶는다.
"""

from typing import Iterable, Optional

from line_notify.config import Settings, get_settings
from line_notify.models.profile import UserProfile
from line_notify.services.http import ClientFactory, default_client_factory
from line_notify.services.notifications.line_notify import LineNotifyService
from line_notify.services.oauth.line import LineOAuthService


class NotifyClient:
    """
    LINE Notify 클라이언트

    설정은 생성 시 한 번 주입되고 이후 변경되지 않는다.
    HTTP 클라이언트는 요청마다 client_factory로 새로 만든다.

    Usage:
        client = NotifyClient(settings)
        redirect_to = client.build_authorization_url()
        profile = await client.authorize(code)
        await client.send_text(profile.token, "hello")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = default_client_factory,
    ) -> None:
        self.settings = settings or get_settings()
        self.oauth = LineOAuthService(self.settings, client_factory)
        self.notify = LineNotifyService(self.settings, client_factory)

    # ==================== OAuth ====================
    def build_authorization_url(self) -> str:
        return self.oauth.build_authorization_url()

    async def exchange_code_for_token(self, code: Optional[str], *, strict: bool = False) -> Optional[str]:
        return await self.oauth.exchange_code_for_token(code, strict=strict)

    async def resolve_identity(self, token: Optional[str]) -> Optional[str]:
        return await self.oauth.resolve_identity(token)

    async def authorize(self, code: Optional[str]) -> UserProfile:
        """인증 코드로 token과 사용자 이름을 얻는다"""
        return await self.oauth.authorize(code)

    # ==================== 메시지 / 연동 해제 ====================
    async def send_text(self, token: str, message: str) -> None:
        await self.notify.send_text(token, message)

    async def send_text_bulk(self, tokens: Iterable[str], message: str) -> None:
        await self.notify.send_text_bulk(tokens, message)

    async def revoke(self, token: Optional[str]) -> None:
        await self.notify.revoke(token)

    async def revoke_bulk(self, tokens: Iterable[Optional[str]]) -> None:
        await self.notify.revoke_bulk(tokens)
