"""Core 타입 및 프로토콜.

이 모듈은 인프라에 의존하지 않습니다.
opensearch_service 및 요청 핸들러 어디서든 import할 수 있습니다.
"""

from core.protocols import SearchTransportProtocol
from core.types import PageWindow, Scalar

__all__ = [
    # Types
    "PageWindow",
    "Scalar",
    # Protocols
    "SearchTransportProtocol",
]
