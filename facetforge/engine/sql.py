"""
SQL search engine.

Compiles a Search into SQLAlchemy Core statements against a single table:

- hits:         SELECT * WHERE <queries + post_filters> ORDER BY ... LIMIT/OFFSET
- total:        SELECT count(*) WHERE <queries + post_filters>
- terms agg:    SELECT col, count(*) WHERE <queries + agg filters> GROUP BY col
- stats agg:    SELECT count(col), min(col), max(col) WHERE <queries + agg filters>

Driver errors are wrapped in EngineExecutionError so callers see one
failure type regardless of the backend.
"""

import logging
from typing import Any

from sqlalchemy import (
    Column,
    ColumnElement,
    Connection,
    Engine,
    MetaData,
    Select,
    String,
    Table,
    and_,
    cast,
    create_engine,
    false,
    func,
    or_,
    select,
    true,
)
from sqlalchemy.exc import SQLAlchemyError

from facetforge.config import settings
from facetforge.engine.base import Bucket, ResultSet, StatsResult, TermsResult
from facetforge.models.failure import EngineExecutionError
from facetforge.search.query import (
    Aggregation,
    Clause,
    MatchClause,
    RangeClause,
    Search,
    StatsAggregation,
    TermClause,
    TermsAggregation,
)

logger = logging.getLogger(__name__)


class SqlSearchEngine:
    """SearchEngine backed by one SQL table."""

    def __init__(self, engine: Engine, table: Table) -> None:
        self._engine = engine
        self._table = table

    @classmethod
    def from_settings(cls) -> "SqlSearchEngine":
        """Connect to settings.database_url and reflect settings.documents_table."""
        engine = create_engine(settings.database_url, echo=settings.debug, pool_pre_ping=True)
        table = Table(settings.documents_table, MetaData(), autoload_with=engine)
        return cls(engine, table)

    def execute(self, search: Search) -> ResultSet:
        try:
            with self._engine.connect() as conn:
                where = self._compile_clauses(search.hit_clauses())

                total = conn.execute(
                    _where(select(func.count()).select_from(self._table), where)
                ).scalar_one()

                rows = conn.execute(self._hits_statement(search, where)).mappings().all()

                aggregations = {
                    name: self._aggregate(conn, search, aggregation)
                    for name, aggregation in search.aggregations.items()
                }
        except SQLAlchemyError as e:
            logger.exception("sql_search_failed", extra={"table": self._table.name})
            raise EngineExecutionError(
                "The search engine failed to execute the query.",
                detail=type(e).__name__,
            ) from e

        logger.debug(
            "sql_search_executed",
            extra={"table": self._table.name, "total": total, "returned": len(rows)},
        )

        return ResultSet(
            documents=[dict(row) for row in rows],
            total=total,
            aggregations=aggregations,
        )

    def _hits_statement(self, search: Search, where: list[ColumnElement[bool]]) -> Select[Any]:
        stmt = _where(select(self._table), where)
        for sort in search.sorts:
            column = self._column(sort.field)
            order = column.desc() if sort.descending else column.asc()
            stmt = stmt.order_by(order.nulls_last())
        if search.offset:
            stmt = stmt.offset(search.offset)
        if search.limit is not None:
            stmt = stmt.limit(search.limit)
        return stmt

    def _aggregate(
        self,
        conn: Connection,
        search: Search,
        aggregation: Aggregation,
    ) -> TermsResult | StatsResult:
        where = self._compile_clauses(search.aggregation_clauses(aggregation))
        column = self._column(aggregation.field)

        if isinstance(aggregation, TermsAggregation):
            count = func.count().label("doc_count")
            stmt = (
                _where(select(column.label("key"), count), where)
                .where(column.is_not(None))
                .group_by(column)
                .order_by(count.desc(), column.asc())
                .limit(aggregation.size)
            )
            return TermsResult(
                buckets=tuple(Bucket(key=key, count=n) for key, n in conn.execute(stmt))
            )

        if isinstance(aggregation, StatsAggregation):
            stmt = _where(select(func.count(column), func.min(column), func.max(column)), where)
            count, minimum, maximum = conn.execute(stmt).one()
            return StatsResult(count=count, min=minimum, max=maximum)

        raise TypeError(f"Unsupported aggregation: {type(aggregation).__name__}")

    def _compile_clauses(self, clauses: list[Clause]) -> list[ColumnElement[bool]]:
        return [self._compile(clause) for clause in clauses]

    def _compile(self, clause: Clause) -> ColumnElement[bool]:
        if isinstance(clause, TermClause):
            return self._column(clause.field).in_(clause.values)

        if isinstance(clause, RangeClause):
            column = self._column(clause.field)
            bounds = []
            if clause.gte is not None:
                bounds.append(column >= clause.gte)
            if clause.lte is not None:
                bounds.append(column <= clause.lte)
            return and_(column.is_not(None), *bounds)

        if isinstance(clause, MatchClause):
            columns = [cast(self._column(name), String) for name in clause.fields]
            if not clause.terms:
                return true()
            if not columns:
                return false()
            return and_(
                *[
                    or_(*[column.icontains(term, autoescape=True) for column in columns])
                    for term in clause.terms
                ]
            )

        raise TypeError(f"Unsupported clause: {type(clause).__name__}")

    def _column(self, name: str) -> Column[Any]:
        try:
            return self._table.c[name]
        except KeyError as e:
            raise EngineExecutionError(
                f"Unknown field '{name}' for table '{self._table.name}'.",
            ) from e


def _where(stmt: Select[Any], conditions: list[ColumnElement[bool]]) -> Select[Any]:
    return stmt.where(*conditions) if conditions else stmt
