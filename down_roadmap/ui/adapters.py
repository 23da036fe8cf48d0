"""
도메인 예외를 Streamlit 오류 표시로 바꾸는 어댑터

Notion 설정 누락, 조회 실패, 렌더링 입력 불일치를 사용자에게 보여줄
메시지로 변환합니다. 도메인 계층과 데이터 계층은 Streamlit을 직접 호출하지 않습니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

import streamlit as st

from ..domain.exceptions import ConfigurationError, DataLoadError, LayoutError

logger = logging.getLogger(__name__)


@contextmanager
def handle_domain_errors() -> Generator[None, None, None]:
    """
    with 블록 안에서 발생한 예외를 st.error 메시지로 표시합니다.

    Examples:
        >>> with handle_domain_errors():
        ...     render_timeline_view(data, timeline)

    Notes:
        - ConfigurationError: Notion 설정 누락
        - DataLoadError: Notion 조회 실패
        - LayoutError: 렌더링 입력 불일치
    """
    try:
        yield

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        st.error(f"❌ 설정 오류: {str(e)}")

    except DataLoadError as e:
        logger.error(f"Data load error: {e}")
        st.error(f"❌ 데이터 로드 실패: {str(e)}")

    except LayoutError as e:
        logger.error(f"Layout error: {e}")
        st.error(f"❌ 타임라인 렌더링 실패: {str(e)}")

    except Exception as e:
        logger.exception("Unexpected error while rendering the roadmap")
        st.error(f"❌ 예상치 못한 오류가 발생했습니다: {type(e).__name__}: {str(e)}")
        st.exception(e)
