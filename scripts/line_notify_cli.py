#!/usr/bin/env python3
"""
LINE Notify 운영 스크립트

사용법:
    python scripts/line_notify_cli.py <명령> [옵션]

명령:
    auth-url                   연동 인증 URL 출력
    exchange CODE              인증 코드로 token 교환 후 프로필 출력
    send TOKEN [TOKEN ...]     메시지 전송 (-m/--message 필수)
    revoke TOKEN [TOKEN ...]   연동 해제

설정은 환경변수 또는 .env 파일에서 읽습니다.
    LINE_NOTIFY_CLIENT_ID, LINE_NOTIFY_CLIENT_SECRET, LINE_NOTIFY_CALLBACK_URL
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from line_notify.client import NotifyClient  # noqa: E402
from line_notify.config import get_settings  # noqa: E402
from line_notify.services.errors import BulkOperationError, LineNotifyError  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LINE Notify 연동 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
    python scripts/line_notify_cli.py auth-url
    python scripts/line_notify_cli.py exchange AUTH_CODE
    python scripts/line_notify_cli.py send TOKEN1 TOKEN2 -m "배포 완료"
    python scripts/line_notify_cli.py revoke TOKEN1
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("auth-url", help="연동 인증 URL 출력")

    exchange = subparsers.add_parser("exchange", help="인증 코드로 token 교환")
    exchange.add_argument("code", help="redirect로 받은 인증 코드")

    send = subparsers.add_parser("send", help="메시지 전송")
    send.add_argument("tokens", nargs="+", help="access token 목록")
    send.add_argument("-m", "--message", required=True, help="전송할 메시지")

    revoke = subparsers.add_parser("revoke", help="연동 해제")
    revoke.add_argument("tokens", nargs="+", help="access token 목록")

    return parser


async def run(args: argparse.Namespace, client: NotifyClient) -> int:
    if args.command == "auth-url":
        print(client.build_authorization_url())
    elif args.command == "exchange":
        profile = await client.authorize(args.code)
        print(f"token: {profile.token}")
        print(f"name:  {profile.name or '(알 수 없음)'}")
    elif args.command == "send":
        await client.send_text_bulk(args.tokens, args.message)
        print(f"✅ {len(set(args.tokens))}명에게 전송 완료")
    elif args.command == "revoke":
        await client.revoke_bulk(args.tokens)
        print(f"✅ {len(set(args.tokens))}개 token 연동 해제 완료")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = get_settings()
    if args.command in ("auth-url", "exchange") and not settings.is_configured:
        print("❌ LINE_NOTIFY_CLIENT_ID / LINE_NOTIFY_CLIENT_SECRET / LINE_NOTIFY_CALLBACK_URL 설정이 필요합니다")
        return 2

    client = NotifyClient(settings)
    try:
        return asyncio.run(run(args, client))
    except BulkOperationError as e:
        print(f"❌ {len(e.errors)}/{e.attempted}건 실패")
        for token, error in e.errors.items():
            print(f"   - {token}: {error}")
        return 1
    except LineNotifyError as e:
        print(f"❌ 오류: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
