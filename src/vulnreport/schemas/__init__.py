"""
Schema definitions using Pandera for data validation.

Data contracts for the normalized findings frame and the statistics
table handed to the renderer.
"""

from vulnreport.schemas.findings import findings_schema
from vulnreport.schemas.statistics import SEVERITY_LABELS, StatisticsSchema

__all__ = ["SEVERITY_LABELS", "StatisticsSchema", "findings_schema"]
