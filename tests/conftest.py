"""
pytest 공통 fixture
"""
from typing import Callable, Dict, List, Tuple, Union
from urllib.parse import parse_qs

import httpx
import pytest

from line_notify.config import Settings

Responder = Callable[[httpx.Request], httpx.Response]


class FakeLineApi:
    """MockTransport 기반 LINE Notify API 대역 (네트워크 호출 없음)"""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Responder] = {}

    def route(
        self,
        method: str,
        url: str,
        status_code: int = 200,
        json: Union[dict, list, None] = None,
        text: str = "",
    ) -> None:
        """고정 응답 등록"""
        if json is not None:
            self.routes[(method, url)] = lambda request: httpx.Response(status_code, json=json)
        else:
            self.routes[(method, url)] = lambda request: httpx.Response(status_code, text=text)

    def route_with(self, method: str, url: str, responder) -> None:
        """요청에 따라 응답을 만드는 responder 등록"""
        self.routes[(method, url)] = responder

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.routes.get((request.method, str(request.url)))
        if responder is None:
            return httpx.Response(404, text="no route")
        result = responder(request)
        if hasattr(result, "__await__"):
            result = await result
        return result

    def client_factory(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def calls_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]


def bearer_token(request: httpx.Request) -> str:
    """Authorization 헤더에서 Bearer token 추출"""
    return request.headers["Authorization"].removeprefix("Bearer ")


def form_data(request: httpx.Request) -> Dict[str, str]:
    """form-urlencoded 본문 파싱"""
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


@pytest.fixture
def settings():
    """테스트용 설정"""
    return Settings(
        line_notify_client_id="test-client-id",
        line_notify_client_secret="test-client-secret",
        line_notify_callback_url="https://example.com/line/callback",
    )


@pytest.fixture
def fake_api():
    """LINE Notify API 대역"""
    return FakeLineApi()
