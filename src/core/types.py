"""검색 관련 공용 타입 정의.

이 모듈은 인프라에 의존하지 않습니다.
opensearch_service 및 호출 측 어디서든 import할 수 있습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# match 절에 들어갈 수 있는 스칼라 값 (닫힌 집합)
Scalar = Union[str, int, float, bool]


@dataclass(frozen=True)
class PageWindow:
    """페이지네이션 윈도우 ``[offset, offset + limit)``.

    값 검증이나 상한 클램핑은 하지 않습니다. limit 제한은 호출 측 책임입니다.

    Attributes:
        limit: 반환할 최대 문서 수 (ES/OpenSearch ``size``)
        offset: 건너뛸 문서 수, 0부터 시작 (``from``)
    """

    limit: int
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + self.limit
