"""
shared/aws/metrics/statistics.py - CloudWatch GetMetricStatistics 조회

메트릭 1건(이름 + 통계)을 단일 API 호출로 조회하여 DataPoint 목록으로 돌려줍니다.
호출부는 MetricStatisticsQuery Protocol에만 의존하므로 테스트에서는
datapoint를 미리 정해둔 가짜 구현으로 대체할 수 있습니다.

예시:
    query = CloudWatchStatisticsQuery(get_client(session, "cloudwatch"))
    points = query.query(
        namespace="AWS/ECS",
        metric_name="CPUUtilization",
        statistic=Statistic.AVERAGE,
        dimensions={"ClusterName": "prod"},
        start_time=now - timedelta(seconds=180),
        end_time=now,
        period=60,
    )
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import APICallError

from .types import DataPoint, Statistic

if TYPE_CHECKING:
    from mypy_boto3_cloudwatch import CloudWatchClient

logger = logging.getLogger(__name__)


class MetricStatisticsQuery(Protocol):
    """통계 조회 기능 (GetMetricStatistics 계약)"""

    def query(
        self,
        namespace: str,
        metric_name: str,
        statistic: Statistic,
        dimensions: dict[str, str],
        start_time: datetime,
        end_time: datetime,
        period: int,
    ) -> list[DataPoint]: ...


class CloudWatchStatisticsQuery:
    """boto3 CloudWatch client 기반 MetricStatisticsQuery 구현"""

    def __init__(self, cloudwatch_client: CloudWatchClient | Any):
        self.client = cloudwatch_client

    def query(
        self,
        namespace: str,
        metric_name: str,
        statistic: Statistic,
        dimensions: dict[str, str],
        start_time: datetime,
        end_time: datetime,
        period: int,
    ) -> list[DataPoint]:
        """GetMetricStatistics 호출

        Raises:
            APICallError: ClientError(권한, 스로틀링 등) 또는 네트워크 오류
        """
        try:
            response = self.client.get_metric_statistics(
                Namespace=namespace,
                MetricName=metric_name,
                Dimensions=[{"Name": k, "Value": v} for k, v in dimensions.items()],
                StartTime=start_time,
                EndTime=end_time,
                Period=period,
                Statistics=[statistic.value],
            )
        except ClientError as e:
            raise APICallError.from_client_error("cloudwatch", "get_metric_statistics", e) from e
        except BotoCoreError as e:
            raise APICallError("cloudwatch", "get_metric_statistics", cause=e) from e

        points = parse_datapoints(response)
        logger.debug(f"{namespace} {metric_name}/{statistic.value}: {len(points)} datapoints")
        return points


def parse_datapoints(response: dict[str, Any]) -> list[DataPoint]:
    """GetMetricStatistics 응답을 DataPoint 목록으로 변환

    Timestamp가 없는 항목은 버립니다. 통계 값은 응답에 있는 것만 담습니다.
    """
    points: list[DataPoint] = []
    for raw in response.get("Datapoints", []):
        timestamp = raw.get("Timestamp")
        if timestamp is None:
            continue

        values = {stat: float(raw[stat.value]) for stat in Statistic if raw.get(stat.value) is not None}
        points.append(DataPoint(timestamp=timestamp, values=values))

    return points
