"""
plugins/ecs/fetcher.py - ECS CloudWatch 메트릭 스냅샷 수집

그룹별 하위 메트릭마다 GetMetricStatistics를 1회씩 순차 호출하고,
최근 3분 구간에서 가장 오래된(집계가 끝난) datapoint 값을 골라
평면 딕셔너리 {"CPUUtilizationAverage": 12.5, ...} 로 모읍니다.

CloudWatch 메트릭:
- Namespace: AWS/ECS
- 메트릭: CPUUtilization, MemoryUtilization, CPUReservation, MemoryReservation
- Dimension: ClusterName (+ ServiceName)

실패 처리:
- datapoint 없음 / API 오류 / 응답 이상은 메트릭 단위로 로그만 남기고 건너뜀
- 재시도 없음, 대체 값 없음
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from core.config import settings
from core.exceptions import MalformedResponseError, MetricsPluginError, NoDatapointsError
from shared.aws.metrics import GraphDefinition, MetricSpec, MetricStatisticsQuery, Snapshot, Statistic, SubMetric

from .graphs import TASK_GROUP, build_metric_groups
from .types import Scope

logger = logging.getLogger(__name__)

# Task 그룹은 별도 메트릭이 없어 CPUUtilization의 SampleCount로 계산
TASK_SOURCE_METRIC = "CPUUtilization"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def metric_spec_for(group_name: str, metric: SubMetric) -> MetricSpec:
    """하위 메트릭을 만드는 CloudWatch 조회 대상"""
    if group_name == TASK_GROUP:
        return MetricSpec(TASK_SOURCE_METRIC, Statistic.SAMPLE_COUNT)
    return MetricSpec(group_name, metric.statistic)


def get_last_point(query: MetricStatisticsQuery, scope: Scope, spec: MetricSpec) -> float:
    """메트릭 1건의 안정된 datapoint 값 조회

    가장 최근 datapoint는 아직 집계 중이라 다음 조회에서 값이 바뀔 수 있으므로,
    조회 구간 안에서 timestamp가 가장 이른 datapoint를 사용합니다.

    Args:
        query: 통계 조회 기능
        scope: 조회 범위
        spec: 메트릭 이름 + 통계

    Returns:
        선택된 datapoint의 통계 값

    Raises:
        APICallError: CloudWatch 호출 실패
        NoDatapointsError: 구간 내 datapoint 없음
        MalformedResponseError: 선택된 datapoint에 요청한 통계 값이 없음
    """
    now = _utcnow()

    points = query.query(
        namespace=settings.METRIC_NAMESPACE,
        metric_name=spec.name,
        statistic=spec.statistic,
        dimensions=scope.dimensions(),
        start_time=now - timedelta(seconds=settings.METRIC_LOOKBACK_SECONDS),
        end_time=now,
        period=settings.METRIC_PERIOD_SECONDS,
    )
    if not points:
        raise NoDatapointsError(str(spec))

    least = now
    selected = None
    for point in points:
        if point.timestamp < least:
            least = point.timestamp
            selected = point

    if selected is None:
        raise NoDatapointsError(str(spec), "fetched no settled datapoints")

    try:
        return selected.value(spec.statistic)
    except KeyError as e:
        raise MalformedResponseError(str(spec), spec.statistic.value, cause=e) from e


def fetch_snapshot(
    query: MetricStatisticsQuery,
    scope: Scope,
    groups: GraphDefinition | None = None,
) -> Snapshot:
    """전체 메트릭 스냅샷 수집

    그룹은 이름 순으로 순회합니다. 개별 조회 실패는 경고 로그 후 해당 키를 생략하며,
    스냅샷 전체가 실패하지는 않습니다.

    Args:
        query: 통계 조회 기능
        scope: 조회 범위
        groups: 메트릭 그룹 (None이면 scope로부터 새로 생성)

    Returns:
        {하위 메트릭 이름: 값}
    """
    if groups is None:
        groups = build_metric_groups(scope)

    snapshot: Snapshot = {}
    failed = 0

    for group_name in sorted(groups):
        for metric in groups[group_name].metrics:
            spec = metric_spec_for(group_name, metric)
            try:
                snapshot[metric.name] = get_last_point(query, scope, spec)
            except MetricsPluginError as e:
                failed += 1
                logger.warning(f"{spec}: {e}")

    logger.debug(f"[{scope}] 스냅샷 수집 완료: {len(snapshot)}개 성공, {failed}개 실패")
    return snapshot
