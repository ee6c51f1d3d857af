"""MySQL specific models."""

from .base import ApiModel


class MysqlQueryStats(ApiModel):
    """Per digest statistics from performance_schema."""

    avg_timer_wait: float | None = None
    count_star: int | None = None
    digest: str | None = None
    digest_text: str | None = None
    first_seen: str | None = None
    last_seen: str | None = None
    max_timer_wait: float | None = None
    min_timer_wait: float | None = None
    schema_name: str | None = None
    sum_errors: int | None = None
    sum_rows_affected: int | None = None
    sum_rows_examined: int | None = None
    sum_rows_sent: int | None = None
    sum_timer_wait: float | None = None
    sum_warnings: int | None = None


class MysqlQueryStatsList(ApiModel):
    queries: list[MysqlQueryStats] = []
