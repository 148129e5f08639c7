"""OpenSearch 기반 쿼리 생성/실행 계층.

주요 컴포넌트:
    - OpenSearchQueryBuilder: boolean must 쿼리 빌더 (match, range)
    - OpenSearchService: 페이지네이션 검색 실행 + 타입 변환
    - decode_hits: ``_source`` → 호출 측 타입 변환 (STRICT/SKIP 정책)

Usage:
    >>> from opensearch_service import OpenSearchConfig, OpenSearchQueryBuilder, connect
    >>>
    >>> service = connect(OpenSearchConfig.local())
    >>> query = (
    ...     OpenSearchQueryBuilder()
    ...     .with_must_match("DestCityName", "Paris")
    ...     .with_must_range("AvgTicketPrice", None, 500.0)
    ...     .build()
    ... )
    >>> flights = await service.execute(Flight, index="flights", query=query, limit=10)
"""

from opensearch_service.client import check_connection, create_opensearch_client, load_config
from opensearch_service.config import OpenSearchConfig
from opensearch_service.decoding import DecodedPage, DecodePolicy, decode_hits, decode_source
from opensearch_service.errors import (
    BackendError,
    DecodeError,
    MalformedResponseError,
    SearchConnectionError,
    SearchServiceError,
)
from opensearch_service.factory import connect
from opensearch_service.query import (
    BooleanQuery,
    MatchClause,
    MustClauseSet,
    OpenSearchQueryBuilder,
    RangeClause,
)
from opensearch_service.service import OpenSearchService, extract_hits

__all__ = [
    # Config
    "OpenSearchConfig",
    # Client
    "load_config",
    "create_opensearch_client",
    "check_connection",
    "connect",
    # Query
    "BooleanQuery",
    "MustClauseSet",
    "MatchClause",
    "RangeClause",
    "OpenSearchQueryBuilder",
    # Service
    "OpenSearchService",
    "extract_hits",
    # Decoding
    "DecodePolicy",
    "DecodedPage",
    "decode_hits",
    "decode_source",
    # Errors
    "SearchServiceError",
    "SearchConnectionError",
    "BackendError",
    "MalformedResponseError",
    "DecodeError",
]
