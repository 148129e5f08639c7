"""OpenSearch 비동기 클라이언트 팩토리.

단일 노드 연결용 클라이언트를 생성합니다.
"""

from __future__ import annotations

import logging

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import ImproperlyConfigured, OpenSearchException

from core.protocols import SearchTransportProtocol

from .config import OpenSearchConfig
from .errors import SearchConnectionError

logger = logging.getLogger(__name__)


def load_config() -> OpenSearchConfig:
    """환경변수에서 설정 로드.

    Raises:
        SearchConnectionError: 환경변수 값을 해석할 수 없는 경우 (예: 숫자가 아닌 타임아웃)
    """
    try:
        return OpenSearchConfig()
    except ValueError as e:
        raise SearchConnectionError(f"OpenSearch 설정을 읽을 수 없습니다: {e}") from e


def create_opensearch_client(cfg: OpenSearchConfig | None = None) -> AsyncOpenSearch:
    """AsyncOpenSearch 클라이언트 생성.

    실제 네트워크 연결은 첫 요청 시점에 맺어집니다. 프로세스당 한 번 생성해서
    공유하세요.

    Args:
        cfg: OpenSearch 설정. None이면 기본 설정 사용.

    Returns:
        AsyncOpenSearch 클라이언트 인스턴스.

    Raises:
        SearchConnectionError: URL이 없거나 클라이언트 설정이 잘못된 경우.
    """
    if cfg is None:
        cfg = load_config()

    if not cfg.url:
        raise SearchConnectionError("OPENSEARCH_URL 환경변수를 설정하세요.")

    kwargs = {
        "hosts": [cfg.url],
        "verify_certs": cfg.verify_certs,
        "ssl_show_warn": cfg.verify_certs,
        "timeout": cfg.request_timeout_s,
    }
    # Basic Auth 사용
    if cfg.has_basic_auth:
        kwargs["http_auth"] = (cfg.username, cfg.password)

    try:
        client = AsyncOpenSearch(**kwargs)
    except (OpenSearchException, ImproperlyConfigured, ValueError) as e:
        raise SearchConnectionError(f"OpenSearch 클라이언트 생성 실패 ({cfg.url}): {e}") from e

    logger.info(f"OpenSearch 클라이언트 생성: {cfg.url} (verify_certs={cfg.verify_certs})")
    return client


async def check_connection(client: SearchTransportProtocol) -> bool:
    """OpenSearch 연결 상태 확인.

    Returns:
        연결 성공 여부.
    """
    try:
        return bool(await client.ping())
    except OpenSearchException as e:
        logger.warning(f"OpenSearch ping 실패: {e}")
        return False
