"""opensearch_service 예외 계층.

코어는 어떤 오류도 내부에서 복구하지 않습니다.
모든 실패는 아래 타입으로 호출 측에 그대로 전달됩니다.
"""

from __future__ import annotations

import json
from typing import Any

_SUMMARY_MAX_CHARS = 200


def summarize_payload(payload: Any, max_chars: int = _SUMMARY_MAX_CHARS) -> str:
    """로그/에러 메시지용으로 원본 payload를 잘라낸 JSON 문자열."""
    try:
        text = json.dumps(payload, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = repr(payload)
    if len(text) > max_chars:
        return text[: max_chars - 3] + "..."
    return text


class SearchServiceError(Exception):
    """opensearch_service에서 발생하는 모든 예외의 기본 클래스."""


class SearchConnectionError(SearchServiceError):
    """백엔드 연결 설정 실패 또는 백엔드에 도달할 수 없음."""


class BackendError(SearchServiceError):
    """검색 요청 자체가 실패함 (네트워크 오류, 비정상 응답, 타임아웃)."""

    def __init__(self, index: str, cause: BaseException):
        self.index = index
        self.cause = cause
        super().__init__(f"Search request against index '{index}' failed: {cause!r}")


class MalformedResponseError(SearchServiceError):
    """응답 envelope에 ``hits.hits`` 구조가 없거나 잘못됨."""

    def __init__(self, index: str, detail: str):
        self.index = index
        self.detail = detail
        super().__init__(f"Malformed search response from index '{index}': {detail}")


class DecodeError(SearchServiceError):
    """문서 ``_source``를 호출 측 타입으로 변환하지 못함.

    Attributes:
        payload: 문제가 된 원본 ``_source`` 값 (없으면 None)
        summary: payload를 잘라낸 JSON 문자열
        cause: 원인 예외 (보통 pydantic ``ValidationError``)
        position: 페이지 내 hit 위치 (0부터)
    """

    def __init__(self, payload: Any, cause: BaseException, position: int | None = None):
        self.payload = payload
        self.summary = summarize_payload(payload)
        self.cause = cause
        self.position = position
        where = f" at hit {position}" if position is not None else ""
        super().__init__(f"Failed to decode document{where}: {cause} (payload: {self.summary})")
