"""
plugins/ecs - ECS 클러스터/서비스 CloudWatch 메트릭 플러그인
"""

from .fetcher import fetch_snapshot, get_last_point
from .graphs import build_metric_groups, display_prefix
from .types import Scope

__all__ = [
    "Scope",
    "build_metric_groups",
    "display_prefix",
    "fetch_snapshot",
    "get_last_point",
]
