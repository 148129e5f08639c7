"""OpenSearch 설정 관리.

환경변수로 설정을 관리합니다 (.env 지원).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

LOCAL_URL = "https://localhost:9200"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class OpenSearchConfig:
    """OpenSearch 연결 및 인덱스 설정.

    Attributes:
        url: OpenSearch 노드 URL (예: https://localhost:9200)
        username: HTTP Basic Auth 사용자명 (선택)
        password: HTTP Basic Auth 비밀번호 (선택)
        verify_certs: SSL 인증서 검증 여부
        request_timeout_s: 요청 타임아웃 (초)
        default_index: 기본 검색 대상 인덱스명
    """

    # Connection
    url: str = field(default_factory=lambda: os.getenv("OPENSEARCH_URL", LOCAL_URL))
    username: str | None = field(default_factory=lambda: os.getenv("OPENSEARCH_USERNAME"))
    password: str | None = field(default_factory=lambda: os.getenv("OPENSEARCH_PASSWORD"))

    verify_certs: bool = field(default_factory=lambda: _env_flag("OPENSEARCH_VERIFY_CERTS", "true"))
    request_timeout_s: int = field(
        default_factory=lambda: int(os.getenv("OPENSEARCH_REQUEST_TIMEOUT_S", "30"))
    )

    # Index
    default_index: str = field(
        default_factory=lambda: os.getenv(
            "OPENSEARCH_INDEX", "opensearch_dashboards_sample_data_flights"
        )
    )

    @classmethod
    def local(cls) -> OpenSearchConfig:
        """로컬 개발용 단일 노드 설정 (admin/admin, 인증서 검증 없음)."""
        return cls(url=LOCAL_URL, username="admin", password="admin", verify_certs=False)

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.username and self.password)
