"""
LINE Notify 전송/연동 해제 서비스 유닛 테스트
"""
import asyncio
from collections import Counter

import httpx
import pytest

from conftest import bearer_token, form_data
from line_notify.services.errors import BulkOperationError, RemoteError
from line_notify.services.notifications.line_notify import LineNotifyService

NOTIFY_URL = LineNotifyService.NOTIFY_API_URL
REVOKE_URL = LineNotifyService.REVOKE_API_URL


@pytest.fixture
def service(settings, fake_api):
    return LineNotifyService(settings, fake_api.client_factory)


def fail_for(*bad_tokens):
    """지정한 token에만 400을 돌려주는 responder"""

    def responder(request):
        token = bearer_token(request)
        if token in bad_tokens:
            return httpx.Response(400, json={"status": 400, "message": f"bad token {token}"})
        return httpx.Response(200, json={"status": 200, "message": "ok"})

    return responder


class TestSendText:
    """단일 메시지 전송 테스트"""

    @pytest.mark.asyncio
    async def test_posts_form_encoded_message(self, service, fake_api):
        fake_api.route("POST", NOTIFY_URL, json={"status": 200, "message": "ok"})

        await service.send_text("T1", "배포 완료 & 재시작 = 성공")

        request = fake_api.calls_to(NOTIFY_URL)[0]
        assert bearer_token(request) == "T1"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert form_data(request) == {"message": "배포 완료 & 재시작 = 성공"}

    @pytest.mark.asyncio
    async def test_error_includes_body_and_token(self, service, fake_api):
        fake_api.route("POST", NOTIFY_URL, status_code=401, text='{"status":401,"message":"Invalid access token"}')

        with pytest.raises(RemoteError) as exc_info:
            await service.send_text("T-bad", "hello")

        error = exc_info.value
        assert "Invalid access token" in str(error)
        assert "T-bad" in str(error)
        assert error.status_code == 401
        assert error.token == "T-bad"


class TestSendTextBulk:
    """일괄 전송 테스트"""

    @pytest.mark.asyncio
    async def test_all_success(self, service, fake_api):
        fake_api.route_with("POST", NOTIFY_URL, fail_for())

        await service.send_text_bulk({"A", "B", "C"}, "hello")

        attempted = Counter(bearer_token(r) for r in fake_api.calls_to(NOTIFY_URL))
        assert attempted == {"A": 1, "B": 1, "C": 1}

    @pytest.mark.asyncio
    async def test_one_failure_after_all_attempts(self, service, fake_api):
        fake_api.route_with("POST", NOTIFY_URL, fail_for("B"))

        with pytest.raises(BulkOperationError) as exc_info:
            await service.send_text_bulk({"A", "B", "C"}, "hello")

        attempted = Counter(bearer_token(r) for r in fake_api.calls_to(NOTIFY_URL))
        assert attempted == {"A": 1, "B": 1, "C": 1}

        error = exc_info.value
        assert error.failed_tokens == {"B"}
        assert error.attempted == 3
        assert isinstance(error.errors["B"], RemoteError)
        assert error.errors["B"].token == "B"

    @pytest.mark.asyncio
    async def test_keeps_every_failure(self, service, fake_api):
        fake_api.route_with("POST", NOTIFY_URL, fail_for("A", "C"))

        with pytest.raises(BulkOperationError) as exc_info:
            await service.send_text_bulk(["A", "B", "C"], "hello")

        assert exc_info.value.failed_tokens == {"A", "C"}
        assert "2/3" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_runs_concurrently(self, service, fake_api):
        in_flight = 0
        peak = 0

        async def slow(request):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.05)
            in_flight -= 1
            return httpx.Response(200, json={"status": 200})

        fake_api.route_with("POST", NOTIFY_URL, slow)

        await service.send_text_bulk(["A", "B", "C", "D"], "hello")

        assert peak == 4

    @pytest.mark.asyncio
    async def test_duplicate_tokens_attempted_once(self, service, fake_api):
        fake_api.route_with("POST", NOTIFY_URL, fail_for())

        await service.send_text_bulk(["A", "A", "B"], "hello")

        assert len(fake_api.calls_to(NOTIFY_URL)) == 2

    @pytest.mark.asyncio
    async def test_empty_tokens_is_noop(self, service, fake_api):
        await service.send_text_bulk([], "hello")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_none_and_empty_are_one_recipient(self, service, fake_api):
        fake_api.route("POST", NOTIFY_URL, status_code=401, text="Invalid access token")

        with pytest.raises(BulkOperationError) as exc_info:
            await service.send_text_bulk(["", None, "A"], "hello")

        error = exc_info.value
        assert len(fake_api.calls_to(NOTIFY_URL)) == 2
        assert error.attempted == 2
        assert error.failed_tokens == {"", "A"}
        assert "2/2" in str(error)


class TestRevoke:
    """연동 해제 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", None])
    async def test_empty_token_is_noop(self, service, fake_api, token):
        await service.revoke(token)
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_posts_empty_body(self, service, fake_api):
        fake_api.route("POST", REVOKE_URL, json={"status": 200, "message": "ok"})

        await service.revoke("T1")

        request = fake_api.calls_to(REVOKE_URL)[0]
        assert bearer_token(request) == "T1"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_error_includes_body(self, service, fake_api):
        fake_api.route("POST", REVOKE_URL, status_code=401, text="Invalid access token")

        with pytest.raises(RemoteError, match="Invalid access token") as exc_info:
            await service.revoke("T1")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_bulk_skips_empty_and_aggregates(self, service, fake_api):
        fake_api.route_with("POST", REVOKE_URL, fail_for("B"))

        with pytest.raises(BulkOperationError) as exc_info:
            await service.revoke_bulk(["A", "", "B", "C"])

        attempted = Counter(bearer_token(r) for r in fake_api.calls_to(REVOKE_URL))
        assert attempted == {"A": 1, "B": 1, "C": 1}
        assert exc_info.value.failed_tokens == {"B"}
        assert exc_info.value.operation == "revoke"

    @pytest.mark.asyncio
    async def test_bulk_all_success(self, service, fake_api):
        fake_api.route_with("POST", REVOKE_URL, fail_for())

        await service.revoke_bulk({"A", "B"})

        assert len(fake_api.calls_to(REVOKE_URL)) == 2
