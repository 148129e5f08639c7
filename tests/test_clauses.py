from __future__ import annotations

import json

import pytest

from opensearch_service.query import (
    BooleanQuery,
    MatchClause,
    MustClauseSet,
    OpenSearchQueryBuilder,
    RangeClause,
    clause_from_dict,
)


def test_range_clause_emits_null_bounds():
    clause = RangeClause(field="AvgTicketPrice")

    assert json.dumps(clause.to_dict()) == '{"range": {"AvgTicketPrice": {"gte": null, "lte": null}}}'


def test_serialized_query_parses_back_to_same_clauses():
    query = (
        OpenSearchQueryBuilder()
        .with_must_match("DestCityName", "Paris")
        .with_must_range("AvgTicketPrice", 100.0, None)
        .with_must_match("Cancelled", True)
        .build()
    )

    restored = BooleanQuery.from_dict(json.loads(json.dumps(query.to_dict())))

    assert restored == query
    assert restored.clauses == (
        MatchClause("DestCityName", "Paris"),
        RangeClause("AvgTicketPrice", 100.0, None),
        MatchClause("Cancelled", True),
    )


def test_match_all_is_empty_must():
    assert BooleanQuery.match_all() == BooleanQuery(bool=MustClauseSet())
    assert len(BooleanQuery.match_all().bool) == 0


@pytest.mark.parametrize(
    "raw",
    [
        {"term": {"City": "Paris"}},
        {"match": {"City": "Paris", "Weather": "Rain"}},
        {"range": {"Price": 5}},
        {},
    ],
)
def test_clause_from_dict_rejects_unknown_shapes(raw):
    with pytest.raises(ValueError):
        clause_from_dict(raw)


def test_from_dict_rejects_non_boolean_query():
    with pytest.raises(ValueError):
        BooleanQuery.from_dict({"query": {"match_all": {}}})


@pytest.mark.parametrize(
    "raw",
    [
        {"range": {"Price": {"gt": 5}}},
        {"range": {"Price": {"gte": 1, "format": "yyyy"}}},
        {"range": {"Price": {"gte": "cheap"}}},
        {"range": {"Price": {"lte": True}}},
        {"match": {"City": {"query": "Paris"}}},
        {"match": {"City": ["Paris"]}},
        {"match": {"City": None}},
    ],
)
def test_clause_from_dict_rejects_values_outside_the_ast(raw):
    with pytest.raises(ValueError):
        clause_from_dict(raw)
