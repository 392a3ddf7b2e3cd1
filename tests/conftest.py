from __future__ import annotations

from typing import List, Sequence

import pytest
from fastapi.testclient import TestClient

from routers.sheetlog.store import get_log_table

HEADER = ["Server time", "Core ID", "Published at", "Data"]


class MemoryTable:
    """In-memory Log Table; rows[0] is the header."""

    def __init__(self, data_rows: int = 0):
        self.rows: List[List[str]] = [list(HEADER)]
        self.rows.extend([f"t{i}", "core", f"p{i}", f"d{i}"] for i in range(data_rows))
        self.deletes: List[tuple] = []

    def append_row(self, values: Sequence[str]) -> None:
        self.rows.append(list(values))

    def row_count(self) -> int:
        return len(self.rows)

    def delete_rows(self, start_index: int, count: int) -> None:
        self.deletes.append((start_index, count))
        del self.rows[start_index - 1:start_index - 1 + count]


class FlakyTable(MemoryTable):
    """Fails the first `failures` appends."""

    def __init__(self, failures: int = 1, data_rows: int = 0):
        super().__init__(data_rows)
        self.failures = failures

    def append_row(self, values: Sequence[str]) -> None:
        if self.failures:
            self.failures -= 1
            raise ConnectionError("sheet unavailable")
        super().append_row(values)


@pytest.fixture
def table() -> MemoryTable:
    return MemoryTable()


@pytest.fixture
def client(table):
    from main import app

    app.dependency_overrides[get_log_table] = lambda: table
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
