"""공유 유틸리티 - plugins와 cli에서 공통 사용.

- aws: CloudWatch 메트릭 조회 타입과 GetMetricStatistics 래퍼
- io: mackerel-agent 출력

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    plugins / cli
"""

from . import aws, io

__all__ = ["aws", "io"]
