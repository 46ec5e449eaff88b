"""
사용자 프로필 모델
OAuth 인증 완료 후 얻는 access token과 사용자 이름
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """LINE Notify 사용자 프로필"""

    model_config = ConfigDict(frozen=True)

    token: Optional[str] = Field(None, description="사용자 access token")
    name: Optional[str] = Field(None, description="알림 대상 이름 (status API의 target)")
