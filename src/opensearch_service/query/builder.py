"""Fluent boolean must 쿼리 빌더."""

from __future__ import annotations

import logging

from typing_extensions import Self

from core.types import Scalar

from .clauses import BooleanQuery, Clause, MatchClause, MustClauseSet, RangeClause

logger = logging.getLogger(__name__)


class OpenSearchQueryBuilder:
    """must clause를 누적해 ``BooleanQuery``를 만드는 빌더.

    빈 문자열 값의 match는 추가하지 않습니다. 호출 측은 지정되지 않은 필터를
    분기 없이 ``""``로 넘기면 됩니다.

    각 빌더는 한 번만 사용할 수 있습니다. ``build()`` 이후 다시 호출하면
    ``RuntimeError``가 발생합니다.

    Example:
        >>> query = (
        ...     OpenSearchQueryBuilder()
        ...     .with_must_match("OriginCityName", "Paris")
        ...     .with_must_match("DestWeather", "")  # 무시됨
        ...     .with_must_range("AvgTicketPrice", None, 500.0)
        ...     .build()
        ... )
        >>> len(query.clauses)
        2
    """

    def __init__(self) -> None:
        self._clauses: list[Clause] = []
        self._built = False

    def __len__(self) -> int:
        return len(self._clauses)

    def _ensure_open(self) -> None:
        if self._built:
            raise RuntimeError("빌더는 이미 build()되었습니다. 새 OpenSearchQueryBuilder를 만드세요.")

    def with_must_match(self, field: str, value: Scalar) -> Self:
        """match clause 추가. ``value``가 빈 문자열이면 아무것도 하지 않습니다."""
        self._ensure_open()
        if value == "":
            return self
        clause = MatchClause(field=field, value=value)
        logger.debug(f"must clause 추가: {clause.to_dict()}")
        self._clauses.append(clause)
        return self

    def with_must_range(
        self,
        field: str,
        from_: float | None = None,
        to: float | None = None,
    ) -> Self:
        """range clause 추가.

        두 bound가 모두 None이어도 항상 추가합니다. ``from_ <= to`` 검증은 하지 않으며
        뒤집힌 범위는 그대로 백엔드에 전달됩니다.
        """
        self._ensure_open()
        clause = RangeClause(field=field, lower_bound=from_, upper_bound=to)
        logger.debug(f"must clause 추가: {clause.to_dict()}")
        self._clauses.append(clause)
        return self

    def build(self) -> BooleanQuery:
        """누적된 clause로 불변 ``BooleanQuery`` 생성."""
        self._ensure_open()
        self._built = True
        return BooleanQuery(bool=MustClauseSet(must=tuple(self._clauses)))
