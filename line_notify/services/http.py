"""
HTTP 요청 헬퍼
요청마다 클라이언트 팩토리로 독립된 httpx.AsyncClient를 생성한다.
"""

import asyncio
import logging
from typing import Callable, Dict, Optional

import httpx

from line_notify.services.errors import RemoteError, RequestTimeoutError

logger = logging.getLogger(__name__)

# 인자 없이 새 AsyncClient를 돌려주는 팩토리 (커넥션 풀 관리는 호출자 몫)
ClientFactory = Callable[[], httpx.AsyncClient]

DEFAULT_TIMEOUT_SECONDS = 60.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def default_client_factory() -> httpx.AsyncClient:
    """기본 클라이언트 팩토리"""
    return httpx.AsyncClient()


def is_success(response: httpx.Response) -> bool:
    """2xx 응답 여부"""
    return 200 <= response.status_code < 300


def json_field(response: httpx.Response, field: str) -> Optional[str]:
    """JSON 객체 응답에서 필드 추출 (필드가 없으면 None)"""
    try:
        data = response.json()
    except ValueError as e:
        raise RemoteError(
            f"invalid JSON response: {response.text}",
            status_code=response.status_code,
            body=response.text,
        ) from e

    if not isinstance(data, dict):
        return None
    value = data.get(field)
    return None if value is None else str(value)


async def send_request(
    client_factory: ClientFactory,
    method: str,
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    token: Optional[str] = None,
    data: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """
    요청 1건 전송

    Args:
        client_factory: AsyncClient 팩토리
        method: HTTP 메서드
        url: 요청 URL
        timeout: 요청 전체 제한 시간 (초)
        token: Bearer 인증에 사용할 access token
        data: form 데이터 (None이 아니면 form-urlencoded로 전송, 빈 dict는 빈 본문)

    Returns:
        httpx.Response (상태 코드 판단은 호출자가 한다)

    Raises:
        RequestTimeoutError: 제한 시간 초과
        RemoteError: 연결 실패 등 전송 단계 오류
    """
    headers = {}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    if data is not None:
        headers["Content-Type"] = FORM_CONTENT_TYPE

    logger.debug(f"LINE Notify 요청: {method} {url}")
    try:
        async with client_factory() as client:
            return await asyncio.wait_for(
                client.request(method, url, data=data or None, headers=headers, timeout=timeout),
                timeout,
            )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning(f"LINE Notify 요청 시간 초과: {method} {url} ({timeout}s)")
        raise RequestTimeoutError(
            f"{method} {url} timed out after {timeout}s", token=token
        ) from e
    except httpx.HTTPError as e:
        logger.warning(f"LINE Notify 요청 실패: {method} {url} - {e}")
        raise RemoteError(f"{method} {url} failed: {e}", token=token) from e
