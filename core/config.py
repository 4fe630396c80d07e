"""
core/config.py - 중앙 설정

플러그인 전역에서 사용하는 상수와 환경변수 헬퍼를 정의합니다.

주요 구성 요소:
    - Settings: 불변 설정 데이터클래스 (settings 싱글톤)
    - LogConfig: 로깅 설정 (LOG_LEVEL, LOG_FORMAT 환경변수 지원)
    - get_env_region: 리전 환경변수 조회 (AWS_REGION, AWS_DEFAULT_REGION)
    - get_version: version.txt 기반 버전 문자열
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """플러그인 설정 (불변)"""

    # AWS
    DEFAULT_REGION: str = "ap-northeast-2"
    API_CONNECT_TIMEOUT: int = 10  # 초
    API_READ_TIMEOUT: int = 30  # 초

    # CloudWatch 조회
    METRIC_NAMESPACE: str = "AWS/ECS"
    METRIC_LOOKBACK_SECONDS: int = 180  # 3분 (최소 1개의 집계 완료 datapoint 확보)
    METRIC_PERIOD_SECONDS: int = 60

    # 출력
    DEFAULT_METRIC_KEY_PREFIX: str = "ECS"
    PLUGIN_META_ENV: str = "MACKEREL_AGENT_PLUGIN_META"


settings = Settings()


@dataclass
class LogConfig:
    """로깅 설정

    stdout은 agent 출력 전용이므로 로그는 stderr로만 보냅니다.
    """

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """환경변수에서 로드 (LOG_LEVEL, LOG_FORMAT)"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
        )


def setup_logging(config: LogConfig | None = None, debug: bool = False) -> None:
    """루트 로거 설정"""
    config = config or LogConfig.from_env()
    level = logging.DEBUG if debug else getattr(logging, config.level, logging.WARNING)

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        force=True,
    )

    # botocore DEBUG 로그는 너무 많음
    if not debug:
        logging.getLogger("botocore").setLevel(logging.WARNING)


# =============================================================================
# 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환 (version.txt)"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError:
        return "unknown"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_region() -> str | None:
    """AWS_REGION → AWS_DEFAULT_REGION 순으로 조회 (둘 다 없으면 None)"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None


def is_plugin_meta_mode() -> bool:
    """mackerel-agent가 그래프 정의를 요청하는 실행인지 확인"""
    return bool(os.environ.get(settings.PLUGIN_META_ENV))
