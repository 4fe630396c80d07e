"""입출력 유틸리티.

하위 모듈:
- mackerel: mackerel-agent 플러그인 값/그래프 정의 출력, rich 테이블 출력
"""

from . import mackerel
from .mackerel import build_definitions, format_definitions, format_values, print_table

__all__: list[str] = [
    "mackerel",
    "format_values",
    "format_definitions",
    "build_definitions",
    "print_table",
]
