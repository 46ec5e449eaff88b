"""
LINE Notify 메시지 전송 서비스
연동된 사용자에게 텍스트 알림 전송 및 연동 해제
https://notify-bot.line.me/doc/en/
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Iterable, Optional

from line_notify.config import Settings, get_settings
from line_notify.services.errors import BulkOperationError, RemoteError
from line_notify.services.http import (
    ClientFactory,
    default_client_factory,
    is_success,
    send_request,
)

logger = logging.getLogger(__name__)


class LineNotifyService:
    """LINE Notify 전송/연동 해제 서비스"""

    NOTIFY_API_URL = "https://notify-api.line.me/api/notify"
    REVOKE_API_URL = "https://notify-api.line.me/api/revoke"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = default_client_factory,
    ) -> None:
        self.settings = settings or get_settings()
        self.client_factory = client_factory

    @property
    def timeout(self) -> float:
        return self.settings.line_notify_timeout_seconds

    async def send_text(self, token: str, message: str) -> None:
        """
        텍스트 메시지 전송

        Args:
            token: 사용자 access token
            message: 전송할 메시지

        Raises:
            RemoteError: 2xx가 아닌 응답 (응답 본문과 token 포함)
        """
        response = await send_request(
            self.client_factory,
            "POST",
            self.NOTIFY_API_URL,
            timeout=self.timeout,
            token=token,
            data={"message": message},
        )
        if not is_success(response):
            logger.warning(f"LINE Notify 메시지 전송 실패: {response.status_code}")
            raise RemoteError(
                f"error: {response.text}, token: {token}",
                status_code=response.status_code,
                body=response.text,
                token=token,
            )

        logger.debug("LINE Notify 메시지 전송 성공")

    async def send_text_bulk(self, tokens: Iterable[str], message: str) -> None:
        """
        여러 사용자에게 동시에 메시지 전송

        모든 전송 시도가 끝난 뒤 하나라도 실패했으면 BulkOperationError 발생
        """
        await self._fan_out("send_text", tokens, lambda token: self.send_text(token, message))

    async def revoke(self, token: Optional[str]) -> None:
        """
        연동 해제 (access token 무효화)

        token이 비어 있으면 아무 것도 하지 않는다.
        """
        if not token:
            return

        response = await send_request(
            self.client_factory,
            "POST",
            self.REVOKE_API_URL,
            timeout=self.timeout,
            token=token,
            data={},
        )
        if is_success(response):
            logger.debug("LINE Notify 연동 해제 성공")
            return

        logger.warning(f"LINE Notify 연동 해제 실패: {response.status_code}")
        raise RemoteError(
            response.text,
            status_code=response.status_code,
            body=response.text,
            token=token,
        )

    async def revoke_bulk(self, tokens: Iterable[Optional[str]]) -> None:
        """여러 token 동시 연동 해제"""
        await self._fan_out("revoke", tokens, self.revoke)

    async def _fan_out(
        self,
        operation: str,
        tokens: Iterable[Optional[str]],
        call: Callable[[Optional[str]], Awaitable[None]],
    ) -> None:
        """token마다 call을 동시에 실행하고, 모두 끝난 뒤 실패를 모아서 발생"""
        # None과 빈 문자열은 같은 대상으로 취급
        targets = list(dict.fromkeys(token or "" for token in tokens))
        if not targets:
            return

        results = await asyncio.gather(*(call(token) for token in targets), return_exceptions=True)

        errors: Dict[str, Exception] = {}
        for token, result in zip(targets, results):
            if isinstance(result, Exception):
                errors[token] = result
            elif isinstance(result, BaseException):
                raise result

        logger.info(f"LINE Notify {operation} 일괄 처리: {len(targets) - len(errors)}/{len(targets)} 성공")
        if errors:
            raise BulkOperationError(operation, errors, attempted=len(targets))
