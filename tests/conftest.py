from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    lat: str
    lon: str


class Flight(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    flight_num: str = Field(alias="FlightNum")
    dest_city_name: str = Field(alias="DestCityName")
    avg_ticket_price: float = Field(alias="AvgTicketPrice")
    cancelled: bool = Field(alias="Cancelled")
    day_of_week: int = Field(alias="dayOfWeek")
    dest_location: Location = Field(alias="DestLocation")


def flight_source(i: int, **overrides: Any) -> dict[str, Any]:
    src = {
        "FlightNum": f"F{i:03d}",
        "DestCityName": "Paris",
        "AvgTicketPrice": 100.0 + i,
        "Cancelled": False,
        "dayOfWeek": i % 7,
        "DestLocation": {"lat": "48.85", "lon": "2.35"},
    }
    src.update(overrides)
    return src


def hit(source: dict[str, Any] | None, doc_id: str = "x") -> dict[str, Any]:
    h: dict[str, Any] = {"_index": "flights", "_id": doc_id, "_score": 1.0}
    if source is not None:
        h["_source"] = source
    return h


@dataclass
class FakeTransport:
    """백엔드 상태(정렬된 문서 목록)를 흉내내는 가짜 AsyncOpenSearch."""

    sources: list[dict[str, Any]] = field(default_factory=list)
    response: Any = None
    error: BaseException | None = None
    ping_ok: bool = True
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    async def search(self, *, index: str, body: dict[str, Any], **params: Any) -> Any:
        self.calls.append({"index": index, "body": body, **params})
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        start = params.get("from_", 0)
        size = params.get("size", 10)
        window = self.sources[start : start + size] if size > 0 else []
        return {
            "took": 1,
            "hits": {
                "total": {"value": len(self.sources), "relation": "eq"},
                "hits": [hit(s, doc_id=str(start + i)) for i, s in enumerate(window)],
            },
        }

    async def ping(self, **params: Any) -> bool:
        return self.ping_ok

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(sources=[flight_source(i) for i in range(25)])
