"""
도메인 계층 예외 정의

이 모듈은 Down Roadmap 도메인 계층에서 발생할 수 있는
모든 예외를 정의합니다. UI 계층은 이 예외들을 잡아서
사용자 친화적인 에러 화면으로 변환합니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ConfigurationError(DomainError):
    """
    설정 누락 시 발생하는 예외.

    Notion 토큰이나 데이터소스 ID가 secrets/환경변수에 없을 때 사용합니다.
    """

    pass


class DataLoadError(DomainError):
    """
    데이터 로드 실패 시 발생하는 예외.

    Notion API 호출이 실패했거나, 모든 엔드포인트 폴백이
    소진된 경우 사용합니다.
    """

    pass


class LayoutError(DomainError):
    """
    렌더링 입력이 서로 맞지 않을 때 발생하는 예외.

    레이아웃 엔진 자체는 잘못된 날짜 범위를 보정하므로 예외를 던지지 않고,
    렌더러가 다른 레이아웃의 결과를 받은 경우 등에 사용합니다.
    """

    pass
