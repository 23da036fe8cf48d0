"""Core configuration exports."""

from .config import CONFIG, NotionSettings, RoadmapConfig, resolve_notion_settings

__all__ = ["CONFIG", "RoadmapConfig", "NotionSettings", "resolve_notion_settings"]
