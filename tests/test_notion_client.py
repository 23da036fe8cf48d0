"""
Notion 클라이언트 테스트

가짜 세션을 주입해 엔드포인트 폴백과 페이지네이션을 검증합니다.
"""
from __future__ import annotations

from typing import Any, Dict, List

import pytest
import requests

from down_roadmap.data_sources.notion import NotionClient
from down_roadmap.domain.exceptions import DataLoadError

DATA_SOURCES_URL = "https://api.notion.com/v1/data_sources/src-1/query"
DATABASES_URL = "https://api.notion.com/v1/databases/src-1/query"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = ""):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload or {}
        self.text = text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """post 호출을 기록하고 미리 준비한 응답을 순서대로 돌려줍니다."""

    def __init__(self, responses: List[Any]):
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, *, headers, json, timeout):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _results(*ids, has_more=False, next_cursor=None):
    return {
        "results": [{"id": page_id} for page_id in ids],
        "has_more": has_more,
        "next_cursor": next_cursor,
    }


def test_headers_and_endpoints():
    client = NotionClient("secret", session=FakeSession([]))

    assert client.headers == {
        "Authorization": "Bearer secret",
        "Notion-Version": "2025-09-03",
        "Content-Type": "application/json",
    }
    assert client.endpoints("src-1") == [DATA_SOURCES_URL, DATABASES_URL]


def test_single_page_query():
    session = FakeSession([FakeResponse(payload=_results("a", "b"))])
    client = NotionClient("secret", session=session)

    pages = client.query_source("src-1", {"filter": {"x": 1}})

    assert [page["id"] for page in pages] == ["a", "b"]
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == DATA_SOURCES_URL
    assert call["json"] == {"filter": {"x": 1}, "page_size": 100}
    assert call["timeout"] == 30.0


def test_pagination_follows_cursor():
    """has_more/next_cursor를 따라 모든 페이지를 수집"""
    session = FakeSession(
        [
            FakeResponse(payload=_results("a", has_more=True, next_cursor="cur-2")),
            FakeResponse(payload=_results("b", has_more=True, next_cursor="cur-3")),
            FakeResponse(payload=_results("c")),
        ]
    )
    client = NotionClient("secret", session=session)

    pages = client.query_source("src-1")

    assert [page["id"] for page in pages] == ["a", "b", "c"]
    assert "start_cursor" not in session.calls[0]["json"]
    assert session.calls[1]["json"]["start_cursor"] == "cur-2"
    assert session.calls[2]["json"]["start_cursor"] == "cur-3"


def test_has_more_without_cursor_stops():
    session = FakeSession([FakeResponse(payload=_results("a", has_more=True, next_cursor=None))])

    pages = NotionClient("secret", session=session).query_source("src-1")

    assert [page["id"] for page in pages] == ["a"]
    assert len(session.calls) == 1


@pytest.mark.parametrize("status", [400, 404])
def test_falls_back_to_databases_endpoint(status):
    """400/404 응답이면 databases 엔드포인트로 재시도하고 이후 페이지도 같은 곳에서 조회"""
    session = FakeSession(
        [
            FakeResponse(status, text="not found"),
            FakeResponse(payload=_results("a", has_more=True, next_cursor="cur-2")),
            FakeResponse(payload=_results("b")),
        ]
    )

    pages = NotionClient("secret", session=session).query_source("src-1")

    assert [page["id"] for page in pages] == ["a", "b"]
    assert [call["url"] for call in session.calls] == [DATA_SOURCES_URL, DATABASES_URL, DATABASES_URL]


def test_non_fallback_error_raises_immediately():
    session = FakeSession([FakeResponse(401, text="unauthorized")])

    with pytest.raises(DataLoadError, match=r"Notion query failed \(401\): unauthorized"):
        NotionClient("secret", session=session).query_source("src-1")

    assert len(session.calls) == 1


def test_all_endpoints_failing_raises():
    session = FakeSession([FakeResponse(404), FakeResponse(400)])

    with pytest.raises(DataLoadError) as exc_info:
        NotionClient("secret", session=session).query_source("src-1")

    assert str(exc_info.value) == (
        f"Unable to query Notion source src-1. Tried: {DATA_SOURCES_URL}, {DATABASES_URL}"
    )


def test_network_error_is_wrapped():
    session = FakeSession([requests.ConnectionError("connection refused")])

    with pytest.raises(DataLoadError, match="Notion request failed"):
        NotionClient("secret", session=session).query_source("src-1")


@pytest.mark.parametrize(
    "payload",
    [
        requests.exceptions.JSONDecodeError("Expecting value", "<html>Bad gateway</html>", 0),
        ["unexpected"],
    ],
)
def test_invalid_success_body_raises_data_load_error(payload):
    """2xx 응답이라도 JSON 객체가 아니면 DataLoadError"""
    session = FakeSession([FakeResponse(200, payload=payload)])

    with pytest.raises(DataLoadError, match=r"Notion returned an invalid response \(200\)"):
        NotionClient("secret", session=session).query_source("src-1")
