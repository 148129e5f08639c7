"""Boolean must 쿼리 AST.

OpenSearch 쿼리 DSL의 아래 형태를 그대로 표현합니다.

    {"query": {"bool": {"must": [clause, ...]}}}

clause는 ``{"match": {field: value}}`` 또는
``{"range": {field: {"gte": lower, "lte": upper}}}`` 입니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from core.types import Scalar


@dataclass(frozen=True)
class MatchClause:
    """단일 필드 match 조건."""

    field: str
    value: Scalar

    def to_dict(self) -> dict[str, Any]:
        return {"match": {self.field: self.value}}


@dataclass(frozen=True)
class RangeClause:
    """숫자 범위 조건 (양 끝 포함).

    두 bound 모두 None일 수 있습니다 (열린 범위). None은 JSON null로 직렬화됩니다.
    """

    field: str
    lower_bound: float | None = None
    upper_bound: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"range": {self.field: {"gte": self.lower_bound, "lte": self.upper_bound}}}


Clause = Union[MatchClause, RangeClause]

_SCALAR_TYPES = (str, int, float, bool)
_RANGE_KEYS = frozenset({"gte", "lte"})


def clause_from_dict(raw: Mapping[str, Any]) -> Clause:
    """직렬화된 clause 하나를 AST로 복원.

    Raises:
        ValueError: match/range 형태가 아닌 경우
    """
    if not isinstance(raw, Mapping) or len(raw) != 1:
        raise ValueError(f"Unsupported clause: {raw!r}")

    kind, body = next(iter(raw.items()))
    if not isinstance(body, Mapping) or len(body) != 1:
        raise ValueError(f"Unsupported {kind} clause body: {body!r}")
    field, spec = next(iter(body.items()))

    if kind == "match":
        if not isinstance(spec, _SCALAR_TYPES):
            raise ValueError(f"Unsupported match value for '{field}': {spec!r}")
        return MatchClause(field=field, value=spec)
    if kind == "range":
        if not isinstance(spec, Mapping) or not set(spec) <= _RANGE_KEYS:
            raise ValueError(f"Unsupported range bounds for '{field}': {spec!r}")
        for bound in spec.values():
            if bound is not None and (isinstance(bound, bool) or not isinstance(bound, (int, float))):
                raise ValueError(f"Range bound for '{field}' must be a number or null: {bound!r}")
        return RangeClause(field=field, lower_bound=spec.get("gte"), upper_bound=spec.get("lte"))
    raise ValueError(f"Unknown clause type: {kind}")


@dataclass(frozen=True)
class MustClauseSet:
    """순서가 보존되는 must clause 목록."""

    must: tuple[Clause, ...] = ()

    def __len__(self) -> int:
        return len(self.must)

    def to_dict(self) -> dict[str, Any]:
        return {"must": [c.to_dict() for c in self.must]}


@dataclass(frozen=True)
class BooleanQuery:
    """완성된 불변 쿼리. ``OpenSearchQueryBuilder.build()``의 결과."""

    bool: MustClauseSet = MustClauseSet()

    @classmethod
    def match_all(cls) -> BooleanQuery:
        """빈 must 목록. 백엔드에서는 전체 문서와 매칭됩니다."""
        return cls()

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return self.bool.must

    def to_dict(self) -> dict[str, Any]:
        """검색 요청 body로 보낼 dict."""
        return {"query": {"bool": self.bool.to_dict()}}

    @classmethod
    def from_dict(cls, body: Mapping[str, Any]) -> BooleanQuery:
        """``to_dict()`` 형태의 body를 다시 AST로 복원.

        Raises:
            ValueError: ``query.bool.must`` 구조가 아닌 경우
        """
        try:
            must = body["query"]["bool"]["must"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Not a boolean must query: {body!r}") from e
        if not isinstance(must, list):
            raise ValueError(f"'must' must be a list, got {type(must).__name__}")
        return cls(bool=MustClauseSet(must=tuple(clause_from_dict(c) for c in must)))
