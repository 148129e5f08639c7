"""검색 관련 Protocol(인터페이스) 정의.

이 모듈은 인프라에 의존하지 않습니다.

Protocol은 구조적 서브타이핑(Structural Subtyping)을 지원합니다.
구현체가 이 Protocol을 상속하지 않아도, 시그니처만 맞으면 호환됩니다.
"""

from __future__ import annotations

from typing import Any, Protocol


class SearchTransportProtocol(Protocol):
    """검색 백엔드 트랜스포트 인터페이스.

    ``opensearchpy.AsyncOpenSearch``가 이 시그니처를 만족합니다.
    테스트에서는 가짜 구현체를 주입합니다.

    Example:
        >>> class FakeTransport:
        ...     async def search(self, *, index, body, **params):
        ...         return {"hits": {"hits": []}}
        ...     async def ping(self, **params):
        ...         return True
        ...     async def close(self):
        ...         ...
    """

    async def search(self, *, index: str, body: dict[str, Any], **params: Any) -> Any: ...

    async def ping(self, **params: Any) -> bool: ...

    async def close(self) -> None: ...
