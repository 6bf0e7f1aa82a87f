"""Pytest configuration and fixtures."""

from copy import deepcopy

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.errors import StoreUnavailable
from app.main import app


class FakeStore:
    """In-memory stand-in for SheetStore, keyed by sheet name."""

    def __init__(self, sheets=None):
        self.sheets = deepcopy(sheets or {})
        self.appended = []
        self.fail = False

    def read(self, range_):
        if self.fail:
            raise StoreUnavailable("sheets offline")
        return deepcopy(self.sheets.get(range_.split("!")[0], []))

    def append(self, range_, rows):
        if self.fail:
            raise StoreUnavailable("sheets offline")
        self.appended.append((range_, rows))
        self.sheets.setdefault(range_.split("!")[0], []).extend(deepcopy(rows))
        return True


@pytest.fixture
def students_sheet():
    return [
        ["Name", "Email", "Phone", "RegNo", " class ", "Department"],
        ["Asha", "asha@x.com", "1", "R1", "10A", "CS"],
        ["Ben", "ben@x.com", "2", "R2", "10a ", "ee"],
        ["Cara", "cara@x.com", "3", "R3", "11B", "cs "],
        ["Dev", "dev@x.com", "4", "R4"],
    ]


@pytest.fixture
def store(students_sheet):
    return FakeStore({
        "Students": students_sheet,
        "FacultyUsers": [
            ["Email", "Password", "Role"],
            ["prof@x.com", "s3cret", "faculty"],
            ["root@x.com", "hunter2", "Admin"],
        ],
        "Challenges": [
            ["Title", "Department", "Link", "Date"],
            ["Two Sum", "CS", "https://example.com/1", "2024-01-01"],
            ["Ohm's Law", "EE", "https://example.com/2", "2024-01-02"],
        ],
    })


@pytest.fixture
def client(store):
    # No context manager: lifespan would try to build the real Sheets client
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
