import json
import logging

import pytest
import requests

from worklog.data import duplicate_author_names, load_report, load_report_file, parse_payload
from worklog.errors import EmptyReport, FetchError


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, body: str = "") -> None:
        self._payload = payload
        self.status_code = status_code
        self._body = body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._payload is None:
            return json.loads(self._body)
        return self._payload


class FakeSession:
    def __init__(self, response=None, exc: Exception = None) -> None:
        self.response = response
        self.exc = exc
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


def test_load_report_parses_rows(sample_payload) -> None:
    session = FakeSession(FakeResponse(sample_payload))

    report = load_report("https://example.test/report.json", session=session)

    assert session.urls == ["https://example.test/report.json"]
    assert report.author_names == ["alice@example.com", "bob@example.com"]
    alice = report.rows[0]
    assert [a.name for a in alice.total_activity] == ["commits", "reviews"]
    assert alice.day_wise_activity[0].date == "2024-01-01"
    assert [c.label for c in alice.day_wise_activity[0].children] == ["commits", "reviews"]
    assert report.fill_color_for("reviews") == "#61CDBB"
    assert report.fill_color_for("issues") == "#f5f5f5"


def test_load_report_uses_configured_url(sample_payload, monkeypatch) -> None:
    monkeypatch.setenv("WORKLOG_REPORT_URL", " https://example.test/env.json ")
    session = FakeSession(FakeResponse(sample_payload))

    load_report(session=session)

    assert session.urls == ["https://example.test/env.json"]


def test_transport_error_is_fetch_error() -> None:
    session = FakeSession(exc=requests.ConnectionError("connection refused"))

    with pytest.raises(FetchError) as excinfo:
        load_report("https://example.test/report.json", session=session)

    assert excinfo.value.user_message == "Error fetching the data"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_http_error_status_is_fetch_error() -> None:
    session = FakeSession(FakeResponse({"data": {}}, status_code=404))

    with pytest.raises(FetchError):
        load_report("https://example.test/report.json", session=session)


def test_invalid_json_is_fetch_error() -> None:
    session = FakeSession(FakeResponse(body="<html>not json</html>"))

    with pytest.raises(FetchError):
        load_report("https://example.test/report.json", session=session)


def test_missing_data_field_is_fetch_error() -> None:
    with pytest.raises(FetchError):
        parse_payload({"rows": []})
    with pytest.raises(FetchError):
        parse_payload([])


@pytest.mark.parametrize(
    "data",
    [{}, {"AuthorWorklog": None}, {"AuthorWorklog": {"activityMeta": []}}, {"AuthorWorklog": {"rows": []}}],
)
def test_missing_rows_is_empty_report(data) -> None:
    with pytest.raises(EmptyReport) as excinfo:
        parse_payload({"data": data})

    assert not isinstance(excinfo.value, FetchError)
    assert excinfo.value.user_message == "No data available"


def test_malformed_rows_are_fetch_error() -> None:
    with pytest.raises(FetchError):
        parse_payload({"data": {"AuthorWorklog": {"rows": ["alice"]}}})
    with pytest.raises(FetchError):
        parse_payload({"data": {"AuthorWorklog": {"rows": [{"name": "a", "totalActivity": "3"}]}}})


def test_missing_optional_lists_read_as_empty() -> None:
    report = parse_payload({"data": {"AuthorWorklog": {"rows": [{"name": "solo"}]}}})

    assert report.activity_meta == ()
    assert report.rows[0].total_activity == ()
    assert report.rows[0].day_wise_activity == ()


def test_duplicate_names_are_logged(sample_payload, caplog) -> None:
    rows = sample_payload["data"]["AuthorWorklog"]["rows"]
    rows.append(dict(rows[0]))

    with caplog.at_level(logging.WARNING, logger="worklog.data"):
        report = parse_payload(sample_payload)

    assert duplicate_author_names(report.rows) == ["alice@example.com"]
    assert "alice@example.com" in caplog.text


def test_load_report_file(tmp_path, sample_payload) -> None:
    path = tmp_path / "sample-data.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")

    report = load_report_file(path)

    assert len(report.rows) == 2


def test_load_report_file_missing_is_fetch_error(tmp_path) -> None:
    with pytest.raises(FetchError):
        load_report_file(tmp_path / "missing.json")
