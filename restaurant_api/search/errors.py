from __future__ import annotations


class QueryError(Exception):
    """Base error for a query that cannot be answered."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(QueryError):
    """A required parameter is missing or failed validation."""

    status_code = 400


class DataUnavailableError(QueryError):
    """The dataset is empty, so there is nothing to list."""

    status_code = 500
