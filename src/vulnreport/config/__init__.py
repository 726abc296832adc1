"""
Configuration management with typed Pydantic models.

Provides the spreadsheet column layout, severity vocabulary and report
metadata, loaded from YAML with environment-variable interpolation.
"""

from vulnreport.config.loader import load_config
from vulnreport.config.settings import (
    AppConfig,
    ColumnsConfig,
    ReadingConfig,
    ReportConfig,
    SeverityConfig,
)

__all__ = [
    "AppConfig",
    "ColumnsConfig",
    "ReadingConfig",
    "ReportConfig",
    "SeverityConfig",
    "load_config",
]
