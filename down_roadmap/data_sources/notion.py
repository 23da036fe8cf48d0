"""
Notion API 클라이언트

데이터소스(data_sources) 쿼리 엔드포인트를 먼저 시도하고, 400/404 응답이면
구버전 databases 엔드포인트로 폴백합니다. 페이지네이션을 따라가며
모든 결과 페이지를 모읍니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..core.config import CONFIG, NotionConfig
from ..domain.exceptions import DataLoadError

logger = logging.getLogger(__name__)

NotionPage = Dict[str, Any]


class NotionClient:
    """
    Notion 쿼리 API를 호출하는 최소한의 클라이언트.

    Args:
        token: Notion integration 토큰
        session: 재사용할 requests 세션 (테스트에서는 가짜 세션을 주입)
        config: API 설정 (기본값: CONFIG.notion)
    """

    def __init__(
        self,
        token: str,
        *,
        session: Optional[requests.Session] = None,
        config: NotionConfig = CONFIG.notion,
    ) -> None:
        self._token = token
        self._session = session or requests.Session()
        self._config = config

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Notion-Version": self._config.version,
            "Content-Type": "application/json",
        }

    def endpoints(self, source_id: str) -> List[str]:
        base = self._config.api_base.rstrip("/")
        return [f"{base}/{kind}/{source_id}/query" for kind in self._config.endpoint_kinds]

    def _post(self, endpoint: str, body: Mapping[str, Any]) -> requests.Response:
        try:
            return self._session.post(
                endpoint,
                headers=self.headers,
                json=dict(body),
                timeout=self._config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise DataLoadError(f"Notion request failed: {exc}") from exc

    def query_source(
        self, source_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> List[NotionPage]:
        """
        쿼리 결과의 모든 페이지를 반환합니다.

        처음 성공한 엔드포인트부터 다음 페이지 조회를 시작합니다.

        Raises:
            DataLoadError: 폴백 대상이 아닌 오류 응답을 받았거나 모든 엔드포인트가 실패한 경우
        """
        endpoints = self.endpoints(source_id)
        endpoint_index = 0
        cursor: Optional[str] = None
        results: List[NotionPage] = []

        while True:
            body: Dict[str, Any] = {**(payload or {}), "page_size": self._config.page_size}
            if cursor:
                body["start_cursor"] = cursor

            response: Optional[requests.Response] = None
            for idx in range(endpoint_index, len(endpoints)):
                response = self._post(endpoints[idx], body)
                if response.ok:
                    endpoint_index = idx
                    break
                if response.status_code not in self._config.fallback_statuses:
                    raise DataLoadError(
                        f"Notion query failed ({response.status_code}): {response.text}"
                    )
                logger.info(
                    f"Notion endpoint {endpoints[idx]} returned {response.status_code}, trying next"
                )

            if response is None or not response.ok:
                raise DataLoadError(
                    f"Unable to query Notion source {source_id}. Tried: {', '.join(endpoints)}"
                )

            try:
                data = response.json()
            except ValueError as exc:
                raise DataLoadError(
                    f"Notion returned an invalid response ({response.status_code})"
                ) from exc
            if not isinstance(data, dict):
                raise DataLoadError(f"Notion returned an invalid response ({response.status_code})")

            results.extend(data.get("results") or [])

            cursor = data.get("next_cursor") or None
            if not data.get("has_more") or cursor is None:
                break

        logger.debug(f"Notion source {source_id}: {len(results)} pages")
        return results
