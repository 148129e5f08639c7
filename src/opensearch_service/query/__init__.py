"""Query AST와 빌더."""

from .builder import OpenSearchQueryBuilder
from .clauses import BooleanQuery, Clause, MatchClause, MustClauseSet, RangeClause, clause_from_dict

__all__ = [
    # AST
    "BooleanQuery",
    "MustClauseSet",
    "Clause",
    "MatchClause",
    "RangeClause",
    "clause_from_dict",
    # Builder
    "OpenSearchQueryBuilder",
]
