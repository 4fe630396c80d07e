"""CloudWatch 메트릭 조회 유틸리티.

Usage:
    from shared.aws.metrics import CloudWatchStatisticsQuery, MetricSpec, Statistic
"""

from .statistics import CloudWatchStatisticsQuery, MetricStatisticsQuery, parse_datapoints
from .types import (
    RANGE_STATISTICS,
    DataPoint,
    GraphDefinition,
    MetricGroup,
    MetricSpec,
    Snapshot,
    Statistic,
    SubMetric,
)

__all__ = [
    # 조회
    "MetricStatisticsQuery",
    "CloudWatchStatisticsQuery",
    "parse_datapoints",
    # 타입
    "Statistic",
    "RANGE_STATISTICS",
    "MetricSpec",
    "DataPoint",
    "SubMetric",
    "MetricGroup",
    "GraphDefinition",
    "Snapshot",
]
