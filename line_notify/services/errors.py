"""
LINE Notify 예외 정의
"""

from typing import Dict, Optional, Set


class LineNotifyError(Exception):
    """LINE Notify 연동 예외 베이스 클래스"""


class InvalidInputError(LineNotifyError, ValueError):
    """필수 입력값(auth code 등)이 비어 있음"""


class RemoteError(LineNotifyError):
    """
    원격 서비스 호출 실패

    Attributes:
        status_code: HTTP 상태 코드 (전송 단계 실패 시 None)
        body: 응답 본문 원문
        token: 요청에 사용한 access token (일괄 전송 시 실패 대상 식별용)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.token = token


class RequestTimeoutError(RemoteError):
    """요청 제한 시간 초과"""


class BulkOperationError(LineNotifyError):
    """
    일괄 작업 중 하나 이상의 대상이 실패

    모든 대상에 대한 시도가 끝난 뒤에 발생하며,
    실패한 token별 예외를 모두 보존한다.
    """

    def __init__(self, operation: str, errors: Dict[str, Exception], attempted: int) -> None:
        self.operation = operation
        self.errors = errors
        self.attempted = attempted
        details = "; ".join(f"{token}: {error}" for token, error in errors.items())
        super().__init__(f"{operation} failed for {len(errors)}/{attempted} recipients ({details})")

    @property
    def failed_tokens(self) -> Set[str]:
        """실패한 token 집합"""
        return set(self.errors)
