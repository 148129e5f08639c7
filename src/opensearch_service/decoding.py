"""검색 hit 목록을 호출 측 타입으로 변환.

각 hit의 ``_source``(저장된 문서 본문)만 꺼내 pydantic ``TypeAdapter``로 검증합니다.
필드명 매핑(alias), optional 필드, enum 등은 전부 호출 측 타입 선언의 몫입니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DecodePolicy(str, Enum):
    """문서 변환 실패 처리 정책.

    - STRICT: 한 문서라도 실패하면 페이지 전체가 실패 (기본값, all-or-nothing)
    - SKIP: 실패한 문서는 건너뛰고 ``DecodedPage.failures``에 기록
    """

    STRICT = "strict"
    SKIP = "skip"


@dataclass
class DecodedPage(Generic[T]):
    """변환된 한 페이지 결과."""

    records: list[T] = field(default_factory=list)
    failures: list[DecodeError] = field(default_factory=list)


@lru_cache(maxsize=128)
def _cached_adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _adapter_for(model: Any) -> TypeAdapter[Any]:
    # Annotated[..., 해시 불가 메타데이터] 같은 타입은 캐시하지 않음
    try:
        hash(model)
    except TypeError:
        return TypeAdapter(model)
    return _cached_adapter(model)


def decode_source(source: Any, model: type[T], position: int | None = None) -> T:
    """단일 ``_source`` payload 변환.

    Raises:
        DecodeError: payload가 model 형태와 맞지 않는 경우
    """
    try:
        return _adapter_for(model).validate_python(source)
    except ValidationError as e:
        raise DecodeError(source, e, position) from e


def decode_hits(
    hits: Sequence[Mapping[str, Any]],
    model: type[T],
    policy: DecodePolicy = DecodePolicy.STRICT,
) -> DecodedPage[T]:
    """hit 목록을 순서대로 변환.

    ``_source``가 없는 hit은 payload None의 변환 실패로 취급합니다.

    Args:
        hits: 응답의 ``hits.hits`` 목록
        model: 변환 대상 타입 (pydantic 모델, dataclass, TypedDict 등)
        policy: 변환 실패 처리 정책

    Returns:
        변환된 레코드(백엔드 순서 유지)와 SKIP 정책에서 건너뛴 실패 목록

    Raises:
        DecodeError: STRICT 정책에서 하나라도 변환에 실패한 경우
    """
    page: DecodedPage[T] = DecodedPage()
    for i, hit in enumerate(hits):
        try:
            page.records.append(decode_source(hit.get("_source"), model, position=i))
        except DecodeError as e:
            if policy is DecodePolicy.STRICT:
                raise
            logger.warning(f"문서 변환 실패로 건너뜀 (hit {i}, _id={hit.get('_id')}): {e.summary}")
            page.failures.append(e)
    return page
