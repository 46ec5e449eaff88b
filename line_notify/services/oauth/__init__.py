"""
LINE Notify OAuth 서비스
"""

from line_notify.services.oauth.line import LineOAuthService

__all__ = ["LineOAuthService"]
