"""
환경변수 설정 모듈
Pydantic Settings를 사용하여 LINE Notify 연동 설정을 관리합니다.
설정은 환경변수 또는 .env 파일에서 가져옵니다.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """LINE Notify 연동 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # ========== LINE Notify OAuth 설정 ==========
    line_notify_client_id: str = ""
    line_notify_client_secret: str = ""
    line_notify_callback_url: str = ""

    # ========== HTTP 설정 ==========
    # 요청 1건 전체에 적용되는 제한 시간
    line_notify_timeout_seconds: float = 60.0

    @property
    def is_configured(self) -> bool:
        """OAuth 자격 증명이 모두 설정되었는지 여부"""
        return bool(
            self.line_notify_client_id
            and self.line_notify_client_secret
            and self.line_notify_callback_url
        )


@lru_cache()
def get_settings() -> Settings:
    """캐싱된 설정 인스턴스 반환"""
    return Settings()
