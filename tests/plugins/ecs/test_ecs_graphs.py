"""
tests/plugins/ecs/test_ecs_graphs.py - ECS 그래프 정의 테스트
"""

import pytest

from plugins.ecs import Scope, build_metric_groups, display_prefix
from shared.aws.metrics import Statistic

# =============================================================================
# display_prefix 테스트
# =============================================================================


class TestDisplayPrefix:
    """display_prefix() 함수 테스트"""

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            ("ECS", "ECS"),
            ("ecs", "Ecs"),
            ("my-ecs", "My Ecs"),
            ("my-ECS-cluster", "My ECS Cluster"),
            ("prod_ecs", "Prod_ecs"),
            ("ecs 2", "Ecs 2"),
            ("ecs.prod", "Ecs.Prod"),
            ("prod-ecs.v2", "Prod Ecs.V2"),
        ],
    )
    def test_word_casing(self, prefix, expected):
        assert display_prefix(prefix) == expected

    def test_empty(self):
        assert display_prefix("") == ""


# =============================================================================
# build_metric_groups 테스트
# =============================================================================


class TestBuildMetricGroupsCluster:
    """클러스터 전체 범위"""

    def test_group_names(self, cluster_scope):
        groups = build_metric_groups(cluster_scope)

        assert set(groups) == {"CPUUtilization", "MemoryUtilization", "CPUReservation", "MemoryReservation"}
        assert "Task" not in groups

    def test_range_metrics(self, cluster_scope):
        groups = build_metric_groups(cluster_scope)

        for name, group in groups.items():
            assert group.unit == "percentage"
            assert group.metric_names == [f"{name}Average", f"{name}Minimum", f"{name}Maximum"]
            assert [m.label for m in group.metrics] == ["Average", "Minimum", "Maximum"]
            assert [m.statistic for m in group.metrics] == [
                Statistic.AVERAGE,
                Statistic.MINIMUM,
                Statistic.MAXIMUM,
            ]

    def test_labels_default_prefix(self, cluster_scope):
        groups = build_metric_groups(cluster_scope)

        assert groups["CPUUtilization"].label == "ECS CPUUtilization"
        assert groups["MemoryReservation"].label == "ECS MemoryReservation"

    def test_labels_custom_prefix(self, cluster_scope):
        groups = build_metric_groups(cluster_scope, prefix="my-ecs")

        assert groups["CPUUtilization"].label == "My Ecs CPUUtilization"

    def test_empty_prefix_uses_default(self, cluster_scope):
        groups = build_metric_groups(cluster_scope, prefix="")

        assert groups["CPUUtilization"].label == "ECS CPUUtilization"


class TestBuildMetricGroupsService:
    """서비스 범위"""

    def test_group_names(self, service_scope):
        groups = build_metric_groups(service_scope)

        assert set(groups) == {"CPUUtilization", "MemoryUtilization", "Task"}
        assert "CPUReservation" not in groups
        assert "MemoryReservation" not in groups

    def test_task_group(self, service_scope):
        task = build_metric_groups(service_scope)["Task"]

        assert task.label == "ECS Task"
        assert task.unit == "integer"
        assert len(task.metrics) == 1
        assert task.metrics[0].name == "TaskRunning"
        assert task.metrics[0].label == "Running"
        assert task.metrics[0].statistic == Statistic.SAMPLE_COUNT


class TestBuildMetricGroupsExclusive:
    """Reservation 그룹과 Task 그룹은 배타적"""

    @pytest.mark.parametrize("service", [None, "", "web", "api-v2"])
    def test_exactly_one_branch(self, service):
        groups = build_metric_groups(Scope(cluster="prod", service=service))

        assert {"CPUUtilization", "MemoryUtilization"} <= set(groups)

        has_task = "Task" in groups
        has_reservation = "CPUReservation" in groups and "MemoryReservation" in groups
        assert has_task != has_reservation
        assert has_task == bool(service)

    def test_fresh_instances(self, cluster_scope):
        """호출마다 새 정의 생성"""
        first = build_metric_groups(cluster_scope)
        second = build_metric_groups(cluster_scope)

        assert first == second
        assert first is not second
        assert first["CPUUtilization"] is not second["CPUUtilization"]
