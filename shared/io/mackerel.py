"""
shared/io/mackerel.py - mackerel-agent 플러그인 출력

스냅샷과 그래프 정의를 agent가 읽는 형식으로 변환합니다.

값 출력 (1줄 = 메트릭 1개, 탭 구분):
    ECS.CPUUtilization.CPUUtilizationAverage\t12.500000\t1700000000

그래프 정의 출력 (MACKEREL_AGENT_PLUGIN_META 설정 시):
    # mackerel-agent-plugin
    {"graphs": {"ECS.CPUUtilization": {"label": ..., "unit": ..., "metrics": [...]}}}
"""

from __future__ import annotations

import json
import time
from typing import TextIO

from rich.console import Console
from rich.table import Table

from core.config import settings
from shared.aws.metrics import GraphDefinition, Snapshot

META_HEADER = "# mackerel-agent-plugin"


def metric_key_prefix(prefix: str | None) -> str:
    """메트릭 키 prefix (비어 있으면 기본값)"""
    return prefix or settings.DEFAULT_METRIC_KEY_PREFIX


def format_values(
    snapshot: Snapshot,
    groups: GraphDefinition,
    prefix: str | None = None,
    now: float | None = None,
) -> list[str]:
    """스냅샷을 agent 값 출력 줄 목록으로 변환

    스냅샷에 없는 메트릭(조회 실패)은 출력하지 않습니다.
    """
    key_prefix = metric_key_prefix(prefix)
    timestamp = int(now if now is not None else time.time())

    lines: list[str] = []
    for group_name in sorted(groups):
        for metric in groups[group_name].metrics:
            if metric.name not in snapshot:
                continue
            key = f"{key_prefix}.{group_name}.{metric.name}"
            lines.append(f"{key}\t{snapshot[metric.name]:f}\t{timestamp}")
    return lines


def build_definitions(groups: GraphDefinition, prefix: str | None = None) -> dict:
    """그래프 정의 딕셔너리 ({"graphs": {...}})"""
    key_prefix = metric_key_prefix(prefix)
    return {"graphs": {f"{key_prefix}.{name}": groups[name].to_dict() for name in sorted(groups)}}


def format_definitions(groups: GraphDefinition, prefix: str | None = None) -> list[str]:
    """그래프 정의 출력 줄 목록 (헤더 + JSON 1줄)"""
    return [META_HEADER, json.dumps(build_definitions(groups, prefix), ensure_ascii=False)]


def write_lines(lines: list[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(f"{line}\n")
    stream.flush()


def print_table(
    snapshot: Snapshot,
    groups: GraphDefinition,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    """스냅샷을 rich 테이블로 출력 (사람 확인용)"""
    console = console or Console()

    table = Table(title=title, show_lines=False)
    table.add_column("Group", style="cyan")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Unit", style="dim")

    for group_name in sorted(groups):
        group = groups[group_name]
        for metric in group.metrics:
            if metric.name in snapshot:
                value = f"{snapshot[metric.name]:.2f}"
            else:
                value = "[red]-[/red]"
            table.add_row(group_name, metric.name, value, group.unit)

    console.print(table)
