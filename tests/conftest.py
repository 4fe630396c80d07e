"""
tests/conftest.py - pytest 공통 픽스처

CloudWatch 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_query, cluster_scope):
        # fake_query: datapoint를 미리 정해둔 MetricStatisticsQuery 구현
        # cluster_scope: 클러스터 전체 조회 범위
        pass
"""

import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from plugins.ecs import Scope  # noqa: E402
from shared.aws.metrics import DataPoint, Statistic  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("MACKEREL_AGENT_PLUGIN_META", raising=False)
    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "ap-northeast-2"

        yield mock_session


@pytest.fixture
def mock_cloudwatch_client():
    """CloudWatch 클라이언트 모킹 (기본: datapoint 없음)"""
    mock_client = MagicMock()
    mock_client.get_metric_statistics.return_value = {"Label": "CPUUtilization", "Datapoints": []}
    return mock_client


# =============================================================================
# 조회 범위 / datapoint 픽스처
# =============================================================================


@pytest.fixture
def cluster_scope() -> Scope:
    return Scope(cluster="prod")


@pytest.fixture
def service_scope() -> Scope:
    return Scope(cluster="prod", service="web")


@pytest.fixture
def fixed_now():
    """fetcher의 현재 시각 고정"""
    now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    with patch("plugins.ecs.fetcher._utcnow", return_value=now):
        yield now


def _make_datapoint(
    now: datetime,
    seconds_ago: int,
    average: Optional[float] = None,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
    sample_count: Optional[float] = None,
) -> DataPoint:
    """DataPoint 테스트 데이터 생성"""
    values = {
        Statistic.AVERAGE: average,
        Statistic.MINIMUM: minimum,
        Statistic.MAXIMUM: maximum,
        Statistic.SAMPLE_COUNT: sample_count,
    }
    return DataPoint(
        timestamp=now - timedelta(seconds=seconds_ago),
        values={k: v for k, v in values.items() if v is not None},
    )


# =============================================================================
# 가짜 통계 조회 기능
# =============================================================================


@dataclass
class QueryCall:
    """기록된 query() 호출"""

    namespace: str
    metric_name: str
    statistic: Statistic
    dimensions: Dict[str, str]
    start_time: datetime
    end_time: datetime
    period: int


@dataclass
class FakeStatisticsQuery:
    """(메트릭 이름, 통계)별로 미리 정해둔 datapoint를 돌려주는 MetricStatisticsQuery

    responses 값이 Exception이면 해당 조회에서 raise합니다.
    등록되지 않은 조회는 default를 돌려줍니다.
    """

    responses: Dict[Any, Any] = field(default_factory=dict)
    default: Any = field(default_factory=list)
    calls: List[QueryCall] = field(default_factory=list)

    def query(self, namespace, metric_name, statistic, dimensions, start_time, end_time, period):
        self.calls.append(QueryCall(namespace, metric_name, statistic, dict(dimensions), start_time, end_time, period))

        result = self.responses.get((metric_name, statistic), self.default)
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def fake_query() -> FakeStatisticsQuery:
    return FakeStatisticsQuery()


# =============================================================================
# 유틸리티 함수
# =============================================================================


def _create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "GetMetricStatistics",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


@pytest.fixture
def aws_config_file(tmp_path, monkeypatch):
    """임시 AWS config 파일로 격리된 환경

    리전 / 프로파일 환경변수를 제거하고, 반환된 함수로 config 내용을 씁니다.
    """
    for key in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_REGION", "AWS_DEFAULT_REGION"):
        monkeypatch.delenv(key, raising=False)

    config_path = tmp_path / "config"
    config_path.write_text("", encoding="utf-8")
    credentials_path = tmp_path / "credentials"
    credentials_path.write_text("", encoding="utf-8")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_path))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_path))

    def write(content: str) -> Path:
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return write


@pytest.fixture
def make_datapoint():
    """DataPoint 팩토리"""
    return _make_datapoint


@pytest.fixture
def client_error():
    """ClientError 팩토리"""
    return _create_mock_client_error
