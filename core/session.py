"""
core/session.py - boto3 Session / client 생성 헬퍼

주요 구성 요소:
- create_session: 정적 액세스 키 / 프로파일 / 기본 체인 기반 boto3 Session 생성
- get_client: retry + 타임아웃이 설정된 boto3 client 생성

세션 생성 실패는 SessionError로 변환되며, 메트릭 조회 전에 프로세스를 종료시킵니다.

Example:
    from core.session import create_session, get_client

    session = create_session(profile="my-profile", region="ap-northeast-2")
    cloudwatch = get_client(session, "cloudwatch", max_attempts=1)
"""

from __future__ import annotations

import logging
from typing import Any, Literal, cast

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from core.config import get_env_region, settings
from core.exceptions import SessionError

logger = logging.getLogger(__name__)

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_RETRY_MODE: RetryMode = "standard"


def create_session(
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
    profile: str | None = None,
    region: str | None = None,
) -> boto3.Session:
    """boto3 Session 생성

    액세스 키는 ID/Secret이 모두 주어졌을 때만 사용하고,
    그렇지 않으면 프로파일 또는 기본 자격증명 체인을 사용합니다.

    리전 우선순위:
        1. region 인자 (--region)
        2. AWS_REGION / AWS_DEFAULT_REGION 환경변수
        3. 프로파일 / AWS config 파일의 region (boto3 해석)
        4. settings.DEFAULT_REGION

    Args:
        access_key_id: AWS Access Key ID
        secret_access_key: AWS Secret Access Key
        profile: AWS 프로파일 이름
        region: 리전 (None이면 환경변수 → 프로파일 → 기본값)

    Returns:
        boto3 Session

    Raises:
        SessionError: 프로파일 없음 등으로 세션을 만들 수 없는 경우
    """
    region = region or get_env_region()
    identifier = profile or "static-credentials"

    kwargs: dict[str, Any] = {}
    if region:
        kwargs["region_name"] = region
    if access_key_id and secret_access_key:
        kwargs["aws_access_key_id"] = access_key_id
        kwargs["aws_secret_access_key"] = secret_access_key
        identifier = "static-credentials"
    elif profile:
        kwargs["profile_name"] = profile
    else:
        identifier = "default"

    try:
        session = boto3.Session(**kwargs)
        # 프로파일 / config 파일에도 리전이 없을 때만 기본 리전 사용
        if session.region_name is None:
            kwargs["region_name"] = settings.DEFAULT_REGION
            session = boto3.Session(**kwargs)
    except BotoCoreError as e:
        raise SessionError(identifier, region or "auto", "세션 생성 실패", cause=e) from e

    logger.debug(f"boto3 세션 생성: {identifier}/{session.region_name}")
    return session


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = settings.API_CONNECT_TIMEOUT,
    read_timeout: int = settings.API_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Retry가 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (cloudwatch 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (1이면 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client

    Raises:
        SessionError: 리전 누락 등으로 client를 만들 수 없는 경우
    """
    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    region = region_name or session.region_name or ""
    try:
        # session.client은 문자열 서비스명을 받지만 boto3-stubs는 Literal 타입 요구
        return session.client(  # pyright: ignore[reportCallIssue]
            cast(Any, service_name),
            region_name=region_name,
            config=config,
            **kwargs,
        )
    except BotoCoreError as e:
        raise SessionError(service_name, region, "client 생성 실패", cause=e) from e
