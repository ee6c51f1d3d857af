"""PostgreSQL specific models."""

from .base import ApiModel, ApiPayload


class CreatePoolPayload(ApiPayload):
    database: str | None = None
    pool_name: str | None = None
    pool_mode: str | None = None
    pool_size: int | None = None
    username: str | None = None


class UpdatePoolPayload(ApiPayload):
    database: str | None = None
    pool_mode: str | None = None
    pool_size: int | None = None
    username: str | None = None


class QueryStatsPayload(ApiPayload):
    limit: int | None = None
    offset: int | None = None
    order_by: str | None = None


class PostgresQueryStats(ApiModel):
    """Per statement statistics from pg_stat_statements."""

    calls: int | None = None
    database_name: str | None = None
    max_time: float | None = None
    mean_time: float | None = None
    min_time: float | None = None
    query: str | None = None
    queryid: int | None = None
    rows: int | None = None
    stddev_time: float | None = None
    total_time: float | None = None
    user_name: str | None = None


class PostgresQueryStatsList(ApiModel):
    queries: list[PostgresQueryStats] = []
