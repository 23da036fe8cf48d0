"""
데이터 소스 계층

Notion 데이터소스에서 실험/릴리스 레코드를 로드하는 기능을 제공합니다.
"""

from .loader import experiments_query, load_roadmap_data, releases_query, window_start_for
from .notion import NotionClient
from .session import ensure_roadmap_data, fetch_roadmap_data

__all__ = [
    # 클라이언트
    "NotionClient",
    # 로더 함수
    "load_roadmap_data",
    "window_start_for",
    "experiments_query",
    "releases_query",
    # 세션/캐시
    "ensure_roadmap_data",
    "fetch_roadmap_data",
]
