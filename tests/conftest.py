"""
Shared fixtures: canned SEC payloads and in-memory port implementations.
"""
import copy

import httpx
import pytest

from sec_filings_mcp.core.errors import UpstreamUnavailable
from sec_filings_mcp.core.ports import DirectorySource, SubmissionSource


TICKERS_PAYLOAD = {
    "0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
    "1": {"cik_str": 789019, "ticker": "MSFT", "title": "MICROSOFT CORP"},
    "2": {"cik_str": "1318605", "ticker": "tsla", "title": "Tesla, Inc."},
    "3": {"cik_str": 1418121, "ticker": "APLE", "title": "Apple Hospitality REIT, Inc."},
    "4": {"cik_str": 1045810, "ticker": "NVDA", "title": "NVIDIA CORP"},
}

AAPL_SUBMISSIONS = {
    "cik": "320193",
    "name": "Apple Inc.",
    "ein": "942404110",
    "sic": "3571",
    "sicDescription": "Electronic Computers",
    "category": "Large accelerated filer",
    "entityType": "operating",
    "fiscalYearEnd": "0928",
    "stateOfIncorporation": "CA",
    "phone": "(408) 996-1010",
    "website": "",
    "formerNames": [{"name": "APPLE COMPUTER INC", "from": "1994-01-26", "to": "2007-01-04"}],
    "addresses": {
        "business": {"street1": "ONE APPLE PARK WAY", "city": "CUPERTINO", "stateOrCountry": "CA", "zipCode": "95014"}
    },
    "filings": {
        "recent": {
            "form": ["4", "10-K", "3", "8-K", "10-Q"],
            "filingDate": ["2023-11-20", "2023-11-03", "2023-10-15", "2023-08-03", "2023-08-04"],
            "accessionNumber": [
                "0000320193-23-000120",
                "0000320193-23-000106",
                "0000320193-23-000099",
                "0000320193-23-000075",
                "0000320193-23-000077",
            ],
            "primaryDocument": [
                "xslF345X05/wf-form4.xml",
                "aapl-20230930.htm",
                "xslF345X02/wf-form3.xml",
                "aapl-20230803.htm",
                "aapl-20230701.htm",
            ],
            "primaryDocDescription": ["", "10-K", "", "8-K", "10-Q"],
            "reportDate": ["2023-11-16", "2023-09-30", "2023-10-13", "2023-08-03", "2023-07-01"],
        }
    },
}


def aapl_submissions() -> dict:
    return copy.deepcopy(AAPL_SUBMISSIONS)


class FakeDirectorySource(DirectorySource):
    """In-memory DirectorySource that counts fetches"""

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload if payload is not None else TICKERS_PAYLOAD
        self.error = error
        self.calls = 0

    def fetch_directory(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.payload


class FakeSubmissionSource(SubmissionSource):
    """In-memory SubmissionSource keyed by 10-digit CIK"""

    def __init__(self, records=None):
        self.records = records if records is not None else {"0000320193": aapl_submissions()}
        self.requested: list[str] = []

    def fetch_submissions(self, cik):
        self.requested.append(cik)
        if cik not in self.records:
            raise UpstreamUnavailable("SEC API error: 404", status_code=404)
        return self.records[cik]


class FakeClock:
    """Controllable monotonic clock"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SecRouter:
    """httpx.MockTransport handler that serves canned SEC responses"""

    def __init__(self, submissions=None, tickers_status: int = 200):
        self.submissions = submissions if submissions is not None else {"0000320193": aapl_submissions()}
        self.tickers_status = tickers_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/files/company_tickers.json":
            if self.tickers_status != 200:
                return httpx.Response(self.tickers_status)
            return httpx.Response(200, json=TICKERS_PAYLOAD)
        if path.startswith("/submissions/CIK"):
            cik = path[len("/submissions/CIK"):-len(".json")]
            if cik in self.submissions:
                return httpx.Response(200, json=self.submissions[cik])
        return httpx.Response(404)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def directory_source():
    return FakeDirectorySource()


@pytest.fixture
def submission_source():
    return FakeSubmissionSource()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sec_router():
    return SecRouter()
