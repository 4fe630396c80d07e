"""
plugins/ecs/types.py - ECS 조회 범위
"""

from __future__ import annotations

from dataclasses import dataclass

from core.exceptions import ValidationError


@dataclass(frozen=True)
class Scope:
    """조회 대상 클러스터 (+ 선택적 서비스)

    service가 있으면 클러스터 전체가 아닌 해당 서비스 하나로 범위가 좁혀집니다.
    빈 문자열 service는 None으로 정규화됩니다.

    Attributes:
        cluster: ECS 클러스터 이름 (필수)
        service: ECS 서비스 이름 (선택)
    """

    cluster: str
    service: str | None = None

    def __post_init__(self) -> None:
        if not self.cluster:
            raise ValidationError("cluster", self.cluster, "비어있지 않은 클러스터 이름")
        if not self.service:
            object.__setattr__(self, "service", None)

    @property
    def has_service(self) -> bool:
        return self.service is not None

    def dimensions(self) -> dict[str, str]:
        """CloudWatch 차원 (ClusterName, ServiceName 순)"""
        dims = {"ClusterName": self.cluster}
        if self.service:
            dims["ServiceName"] = self.service
        return dims

    def __str__(self) -> str:
        if self.service:
            return f"{self.cluster}/{self.service}"
        return self.cluster
