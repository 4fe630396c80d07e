"""
plugins/ecs/graphs.py - ECS 그래프(메트릭 그룹) 정의

조회 범위(Scope)에 따라 요청할 메트릭 그룹이 달라집니다.

    항상:          CPUUtilization, MemoryUtilization
    클러스터 전체: CPUReservation, MemoryReservation
    서비스 지정:   Task (CPUUtilization SampleCount = 실행 중 태스크 수)

Reservation 그룹과 Task 그룹은 동시에 존재하지 않습니다.
"""

from __future__ import annotations

import re

from core.config import settings
from shared.aws.metrics import RANGE_STATISTICS, GraphDefinition, MetricGroup, Statistic, SubMetric

from .types import Scope

TASK_GROUP = "Task"
TASK_RUNNING = SubMetric(name="TaskRunning", label="Running", statistic=Statistic.SAMPLE_COUNT)

UTILIZATION_GROUPS = ("CPUUtilization", "MemoryUtilization")
RESERVATION_GROUPS = ("CPUReservation", "MemoryReservation")

# 단어 시작 = \w(영숫자/밑줄)가 아닌 문자 바로 뒤의 \w 한 글자 ("prod-ecs.v2" -> "Prod-Ecs.V2")
_WORD_START = re.compile(r"(?<!\w)\w")


def display_prefix(prefix: str) -> str:
    """메트릭 키 prefix를 그래프 라벨용으로 변환

    단어 첫 글자만 대문자로 바꾸고 나머지는 그대로 둔 뒤 '-'를 공백으로 바꿉니다.
    "my-ecs" -> "My Ecs", "ECS" -> "ECS"
    """
    titled = _WORD_START.sub(lambda m: m.group(0).upper(), prefix)
    return titled.replace("-", " ")


def _range_group(name: str, label_prefix: str) -> MetricGroup:
    return MetricGroup(
        label=f"{label_prefix} {name}",
        unit="percentage",
        metrics=[SubMetric(name=f"{name}{stat.value}", label=stat.value, statistic=stat) for stat in RANGE_STATISTICS],
    )


def build_metric_groups(scope: Scope, prefix: str = settings.DEFAULT_METRIC_KEY_PREFIX) -> GraphDefinition:
    """조회 범위에 맞는 메트릭 그룹 생성

    Args:
        scope: 조회 범위
        prefix: 메트릭 키 prefix (라벨에 사용)

    Returns:
        {그룹 이름: MetricGroup}
    """
    label_prefix = display_prefix(prefix or settings.DEFAULT_METRIC_KEY_PREFIX)

    groups: GraphDefinition = {name: _range_group(name, label_prefix) for name in UTILIZATION_GROUPS}

    if scope.has_service:
        # 서비스 단위에서는 Reservation 메트릭이 의미 없음
        groups[TASK_GROUP] = MetricGroup(
            label=f"{label_prefix} {TASK_GROUP}",
            unit="integer",
            metrics=[TASK_RUNNING],
        )
        return groups

    for name in RESERVATION_GROUPS:
        groups[name] = _range_group(name, label_prefix)
    return groups
