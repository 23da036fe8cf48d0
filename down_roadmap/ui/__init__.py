"""
UI 레이어의 공개 API

이 모듈은 타임라인 뷰, SVG 내보내기, 테이블, 어댑터 등을 재수출합니다.
"""

from .adapters import handle_domain_errors
from .svg_export import build_error_svg, build_timeline_svg, export_filename
from .tables import experiments_frame, releases_frame, render_record_tables
from .timeline_view import (
    build_error_panel,
    build_timeline_html,
    render_error_panel,
    render_timeline_view,
)
from .variants import VARIANTS, VariantSettings, resolve_variant, scale_font

__all__ = (
    # Timeline view
    "build_timeline_html",
    "build_error_panel",
    "render_timeline_view",
    "render_error_panel",
    # SVG export
    "build_timeline_svg",
    "build_error_svg",
    "export_filename",
    "VARIANTS",
    "VariantSettings",
    "resolve_variant",
    "scale_font",
    # Tables
    "experiments_frame",
    "releases_frame",
    "render_record_tables",
    # Adapters
    "handle_domain_errors",
)
