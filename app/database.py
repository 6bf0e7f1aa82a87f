import json
import logging
import os
import threading
from typing import List
from urllib.parse import quote

import google.auth.exceptions
import requests
from dotenv import load_dotenv
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from app.errors import StoreUnavailable

load_dotenv()

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"

SPREADSHEET_ID = os.getenv("SPREADSHEET_ID")
STUDENTS_RANGE = os.getenv("STUDENTS_RANGE", "Students!A:H")
FACULTY_RANGE = os.getenv("FACULTY_RANGE", "FacultyUsers!A:C")
CHALLENGES_RANGE = os.getenv("CHALLENGES_RANGE", "Challenges!A:D")

SHEETS_TIMEOUT = os.getenv("SHEETS_TIMEOUT")
SHEETS_TIMEOUT = float(SHEETS_TIMEOUT) if SHEETS_TIMEOUT else None


class SheetStore:
    """Read and append ranges of one spreadsheet via the Sheets v4 values API.

    ``session_factory`` builds an HTTP session. Each worker thread gets its
    own session; only the credentials are shared.
    """

    def __init__(self, session_factory, spreadsheet_id, timeout=None):
        self.session_factory = session_factory
        self.spreadsheet_id = spreadsheet_id
        self.timeout = timeout
        self._local = threading.local()

    @classmethod
    def from_service_account_info(cls, info, spreadsheet_id, timeout=None):
        credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        return cls(lambda: AuthorizedSession(credentials), spreadsheet_id, timeout=timeout)

    @property
    def session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = self.session_factory()
        return session

    def _url(self, range_, suffix=""):
        return f"{SHEETS_API_URL}/{self.spreadsheet_id}/values/{quote(range_, safe='!:')}{suffix}"

    def _call(self, method, url, **kwargs):
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, google.auth.exceptions.GoogleAuthError, ValueError) as exc:
            raise StoreUnavailable(f"{method} {url} failed: {exc}") from exc

    def read(self, range_: str) -> List[List[str]]:
        data = self._call("GET", self._url(range_))
        # The API omits "values" entirely for an empty range
        return data.get("values", [])

    def append(self, range_: str, rows: List[List[str]]) -> bool:
        self._call(
            "POST",
            self._url(range_, ":append"),
            params={"valueInputOption": "USER_ENTERED"},
            json={"values": rows},
        )
        return True


def load_credentials_info():
    raw = os.getenv("GOOGLE_CREDENTIALS")
    if raw:
        return json.loads(raw)

    path = os.getenv("GOOGLE_CREDENTIALS_FILE")
    if path:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)

    raise RuntimeError("Set GOOGLE_CREDENTIALS or GOOGLE_CREDENTIALS_FILE")


def create_store() -> SheetStore:
    if not SPREADSHEET_ID:
        raise RuntimeError("SPREADSHEET_ID is not set")
    store = SheetStore.from_service_account_info(
        load_credentials_info(), SPREADSHEET_ID, timeout=SHEETS_TIMEOUT
    )
    logger.info("Sheets store ready for spreadsheet %s", SPREADSHEET_ID)
    return store
