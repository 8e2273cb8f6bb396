from __future__ import annotations

from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import OperationalError


class FakeResult:
    def __init__(self, rows: List[Mapping[str, Any]]) -> None:
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)

    def first(self):
        return self._rows[0] if self._rows else None

    def one_or_none(self):
        assert len(self._rows) <= 1
        return self._rows[0] if self._rows else None


class FakeTransaction:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class RecordingConnection:
    """
    Connection double that records every statement. Each execute() answers
    with the next entry of ``results`` (an empty result once they run out).
    """

    def __init__(self, *results: List[Mapping[str, Any]]) -> None:
        self.results = list(results)
        self.calls = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True
        return False

    def begin(self):
        return FakeTransaction()

    async def execute(self, statement, params: Optional[dict] = None):
        self.calls.append((statement, params))
        rows = self.results.pop(0) if self.results else []
        return FakeResult(rows)


class FailingConnection(RecordingConnection):
    async def execute(self, statement, params: Optional[dict] = None):
        raise OperationalError(str(statement), params, Exception("connection reset"))


class RecordingContext:
    def __init__(self, connection: RecordingConnection) -> None:
        self.connection = connection

    def create_connection(self):
        return self.connection
