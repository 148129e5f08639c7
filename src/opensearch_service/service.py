"""OpenSearch 쿼리 실행 서비스.

완성된 ``BooleanQuery``를 인덱스에 대해 페이지 단위로 실행하고
hit 목록을 호출 측 타입으로 변환합니다.

Note:
    이 클래스는 재시도, 큐잉, 취소 기능을 제공하지 않습니다.
    타임아웃이 필요하면 호출 측에서 ``asyncio.wait_for``로 감싸세요.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from opensearchpy.exceptions import OpenSearchException

from core.protocols import SearchTransportProtocol
from core.types import PageWindow

from .client import check_connection
from .decoding import DecodePolicy, decode_hits
from .errors import BackendError, MalformedResponseError, SearchConnectionError
from .query import BooleanQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_hits(response: Any, index: str) -> list[Mapping[str, Any]]:
    """응답 envelope에서 ``hits.hits`` 목록 추출.

    Raises:
        MalformedResponseError: ``hits.hits`` 구조가 없거나 잘못된 경우
    """
    if not isinstance(response, Mapping):
        raise MalformedResponseError(index, f"response is {type(response).__name__}, not an object")

    outer = response.get("hits")
    if not isinstance(outer, Mapping):
        raise MalformedResponseError(index, "missing 'hits' object")

    hits = outer.get("hits")
    if not isinstance(hits, list):
        raise MalformedResponseError(index, "missing 'hits.hits' array")

    for i, hit in enumerate(hits):
        if not isinstance(hit, Mapping):
            raise MalformedResponseError(index, f"hit {i} is {type(hit).__name__}, not an object")
    return hits


class OpenSearchService:
    """OpenSearch 검색 실행기.

    요청 핸들러는 이 클래스에만 의존합니다. 클라이언트는 프로세스 시작 시 한 번 만들어
    주입하고, 여러 동시 실행에서 읽기 전용으로 공유합니다.
    """

    def __init__(
        self,
        client: SearchTransportProtocol,
        decode_policy: DecodePolicy = DecodePolicy.STRICT,
    ):
        """
        Args:
            client: AsyncOpenSearch 또는 SearchTransportProtocol 구현체
            decode_policy: 문서 변환 실패 처리 정책 (기본 STRICT)
        """
        self._client = client
        self._decode_policy = decode_policy

    @property
    def client(self) -> SearchTransportProtocol:
        return self._client

    @property
    def decode_policy(self) -> DecodePolicy:
        return self._decode_policy

    async def execute(
        self,
        model: type[T],
        *,
        index: str,
        query: BooleanQuery,
        limit: int,
        offset: int = 0,
    ) -> list[T]:
        """쿼리 실행 후 ``[offset, offset + limit)`` 구간의 문서를 변환해 반환.

        limit/offset은 검증 없이 그대로 백엔드에 전달됩니다.

        Args:
            model: 변환 대상 타입
            index: 대상 인덱스명
            query: 완성된 쿼리
            limit: 최대 반환 문서 수 (``size``)
            offset: 건너뛸 문서 수 (``from``)

        Returns:
            백엔드 정렬 순서를 유지한 레코드 목록

        Raises:
            BackendError: 요청 실패 (네트워크, 비정상 상태코드, 타임아웃)
            MalformedResponseError: 응답에 ``hits.hits``가 없음
            DecodeError: STRICT 정책에서 문서 변환 실패
        """
        window = PageWindow(limit=limit, offset=offset)
        body = query.to_dict()
        logger.debug(f"query ({index} [{window.offset}, {window.end})): {json.dumps(body)}")

        try:
            response = await self._client.search(
                index=index,
                body=body,
                size=window.limit,
                from_=window.offset,
            )
        except (OpenSearchException, asyncio.TimeoutError) as e:
            raise BackendError(index, e) from e

        hits = extract_hits(response, index)
        page = decode_hits(hits, model, self._decode_policy)
        if page.failures:
            logger.warning(
                f"{index}: {len(page.failures)}/{len(hits)}개 문서를 변환하지 못해 제외했습니다."
            )
        return page.records

    async def execute_all(self, model: type[T], *, index: str, limit: int) -> list[T]:
        """빈 쿼리(전체 매칭)로 처음부터 limit개 조회."""
        return await self.execute(
            model,
            index=index,
            query=BooleanQuery.match_all(),
            limit=limit,
            offset=0,
        )

    async def ensure_connected(self) -> None:
        """백엔드 ping 확인.

        Raises:
            SearchConnectionError: 백엔드에 도달할 수 없는 경우
        """
        if not await check_connection(self._client):
            raise SearchConnectionError("OpenSearch에 연결할 수 없습니다 (ping 실패).")

    async def close(self) -> None:
        """프로세스 종료 시 트랜스포트 정리."""
        await self._client.close()
