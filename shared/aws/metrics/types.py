"""
shared/aws/metrics/types.py - CloudWatch 메트릭 공통 타입

주요 구성 요소:
- Statistic: GetMetricStatistics 통계 종류 (Average, Minimum, Maximum, SampleCount)
- MetricSpec: 단일 조회 대상 (메트릭 이름 + 통계)
- DataPoint: 집계 주기 1개에 해당하는 datapoint (timestamp + 통계별 값)
- SubMetric / MetricGroup: agent 그래프 정의 (라벨, 단위, 하위 메트릭)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Statistic(str, Enum):
    """CloudWatch 통계 종류"""

    AVERAGE = "Average"
    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"
    SAMPLE_COUNT = "SampleCount"

    def __str__(self) -> str:
        return self.value


# Task 그룹을 제외한 모든 그룹이 조회하는 통계
RANGE_STATISTICS: tuple[Statistic, ...] = (
    Statistic.AVERAGE,
    Statistic.MINIMUM,
    Statistic.MAXIMUM,
)


@dataclass(frozen=True)
class MetricSpec:
    """조회할 메트릭 1건

    Attributes:
        name: CloudWatch 메트릭 이름 (예: "CPUUtilization")
        statistic: 통계 종류
    """

    name: str
    statistic: Statistic

    def __str__(self) -> str:
        return f"{self.name}/{self.statistic.value}"


@dataclass(frozen=True)
class DataPoint:
    """CloudWatch datapoint

    Attributes:
        timestamp: 집계 주기 시작 시각 (timezone-aware)
        values: 통계별 값 (응답에 포함된 통계만)
    """

    timestamp: datetime
    values: dict[Statistic, float] = field(default_factory=dict)

    def value(self, statistic: Statistic) -> float:
        """통계 값 조회 (없으면 KeyError)"""
        return self.values[statistic]


@dataclass(frozen=True)
class SubMetric:
    """그래프 내 개별 메트릭

    Attributes:
        name: 스냅샷 키 (예: "CPUUtilizationAverage", "TaskRunning")
        label: 표시 라벨 (예: "Average", "Running")
        statistic: 값을 만드는 통계
    """

    name: str
    label: str
    statistic: Statistic
    stacked: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "label": self.label, "stacked": self.stacked}


@dataclass
class MetricGroup:
    """관련 메트릭 묶음 (그래프 1개)

    Attributes:
        label: 그래프 라벨 (예: "ECS CPUUtilization")
        unit: 단위 ("percentage", "integer")
        metrics: 하위 메트릭 목록 (표시 순서 유지)
    """

    label: str
    unit: str
    metrics: list[SubMetric] = field(default_factory=list)

    @property
    def metric_names(self) -> list[str]:
        return [m.name for m in self.metrics]

    def to_dict(self) -> dict[str, Any]:
        """agent 그래프 정의 형식으로 변환"""
        return {
            "label": self.label,
            "unit": self.unit,
            "metrics": [m.to_dict() for m in self.metrics],
        }


# {그룹 이름: MetricGroup}
GraphDefinition = dict[str, MetricGroup]

# {스냅샷 키: 값}
Snapshot = dict[str, float]
