"""
실행 시간 측정 유틸리티

Notion 조회와 레이아웃 계산의 실행 시간을 측정해 로깅하는
데코레이터와 컨텍스트 매니저를 제공합니다.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

WARNING_THRESHOLD_SECONDS = 1.0
ERROR_THRESHOLD_SECONDS = 10.0


def _log_elapsed(operation_name: str, elapsed: float) -> None:
    # 실행 시간에 따라 로그 레벨 조정
    if elapsed >= ERROR_THRESHOLD_SECONDS:
        logger.error(
            f"SLOW: {operation_name} took {elapsed:.2f}s "
            f"(threshold: {ERROR_THRESHOLD_SECONDS:.0f}s)"
        )
    elif elapsed >= WARNING_THRESHOLD_SECONDS:
        logger.warning(
            f"{operation_name} took {elapsed:.2f}s "
            f"(threshold: {WARNING_THRESHOLD_SECONDS:.0f}s)"
        )
    else:
        logger.info(f"{operation_name} completed in {elapsed:.2f}s")


def measure_time(func: F) -> F:
    """
    감싼 함수의 실행 시간을 로그로 남깁니다.

    로그 레벨은 ``_log_elapsed`` 기준을 따릅니다 (1초 WARNING, 10초 ERROR).

    Examples:
        >>> @measure_time
        ... def build():
        ...     return "done"
        >>> build()
        'done'
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__name__, time.perf_counter() - start_time)

    return wrapper  # type: ignore[return-value]


class PerformanceContext:
    """
    with 블록 하나의 실행 시간을 재고, 예외로 끝나면 실패 로그를 남깁니다.

    Attributes:
        operation_name: 측정할 작업의 이름
        elapsed: 경과 시간 (초)
    """

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> PerformanceContext:
        self.start_time = time.perf_counter()
        logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is not None:
            logger.error(f"{self.operation_name} failed after {self.elapsed:.2f}s")
        else:
            _log_elapsed(self.operation_name, self.elapsed)


def measure_time_context(operation_name: str) -> PerformanceContext:
    """
    ``PerformanceContext``를 만드는 단축 함수.

    Examples:
        >>> with measure_time_context("Notion fetch"):
        ...     pass
    """
    return PerformanceContext(operation_name)
