"""
OpenSearch 서비스 팩토리.

프로세스 시작 시 한 번 호출해서 만든 서비스를 요청 핸들러에 명시적으로 넘기세요.
"""

from __future__ import annotations

from .client import create_opensearch_client, load_config
from .config import OpenSearchConfig
from .decoding import DecodePolicy
from .service import OpenSearchService


def connect(
    config: OpenSearchConfig | None = None,
    decode_policy: DecodePolicy = DecodePolicy.STRICT,
) -> OpenSearchService:
    """
    OpenSearch 클라이언트를 만들고 서비스로 감싸 반환합니다.

    Args:
        config: OpenSearch 설정 (None이면 환경변수 기본값 사용)
        decode_policy: 문서 변환 실패 처리 정책

    Returns:
        OpenSearchService

    Raises:
        SearchConnectionError: 클라이언트 설정이 잘못된 경우
    """
    cfg = config or load_config()
    client = create_opensearch_client(cfg)
    return OpenSearchService(client, decode_policy=decode_policy)
