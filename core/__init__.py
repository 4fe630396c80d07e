# core/__init__.py
"""
core - 플러그인 인프라

아키텍처:
    core/
    ├── config.py       # 중앙 설정 관리 (Settings, LogConfig, 환경변수 헬퍼)
    ├── session.py      # boto3 Session / client 생성
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import settings, get_env_region
    from core.exceptions import APICallError, NoDatapointsError
    from core.session import create_session, get_client
"""

from core import config, exceptions, session

__all__: list[str] = [
    "config",
    "exceptions",
    "session",
]
