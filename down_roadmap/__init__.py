"""
Down Roadmap 패키지

Notion에 기록된 실험/릴리스 일정을 하나의 타임라인으로 그려주는 대시보드입니다.
주요 구성:
- 레이아웃 엔진(planning)과 렌더러(ui)의 명확한 분리
- Streamlit 의존성을 UI/세션 계층으로 격리
- 인터랙티브 뷰와 SVG 내보내기가 동일한 좌표 계산을 공유
"""

from __future__ import annotations

__version__ = "1.0.0"
