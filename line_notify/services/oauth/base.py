"""
OAuth 베이스 클래스
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from line_notify.models.profile import UserProfile
from line_notify.services.errors import RemoteError

logger = logging.getLogger(__name__)


class BaseOAuthService(ABC):
    """OAuth 서비스 베이스 클래스"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """제공자 이름"""
        pass

    @abstractmethod
    def build_authorization_url(self) -> str:
        """인증 URL 생성"""
        pass

    @abstractmethod
    async def exchange_code_for_token(self, code: Optional[str], *, strict: bool = False) -> Optional[str]:
        """인증 코드로 액세스 토큰 교환"""
        pass

    @abstractmethod
    async def resolve_identity(self, token: Optional[str]) -> Optional[str]:
        """액세스 토큰으로 사용자 이름 조회"""
        pass

    async def authorize(self, code: Optional[str]) -> UserProfile:
        """
        인증 코드로 사용자 프로필 생성

        토큰 교환 후 사용자 이름을 조회한다.
        이름 조회가 실패해도(연결 오류, 시간 초과 포함) 토큰은 그대로 돌려준다.
        인증 코드는 한 번만 쓸 수 있으므로 발급된 토큰을 버리지 않는다.

        Raises:
            InvalidInputError: code가 비어 있음 (빈 프로필 대신 예외)
            RemoteError: 토큰 교환 실패
        """
        token = await self.exchange_code_for_token(code, strict=True)
        try:
            name = await self.resolve_identity(token)
        except RemoteError as e:
            logger.warning(f"{self.provider_name} 사용자 이름 조회 실패, 토큰만 반환: {e}")
            name = None
        return UserProfile(token=token, name=name)
