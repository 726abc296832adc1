"""
Vulnreport: Security Finding Consolidation and Reporting.

This package merges spreadsheet exports of security findings, removes
duplicates, groups them by problem and severity, and renders a Word report
ordered from the most to the least severe group.
"""

from importlib.metadata import version

__version__ = version("vulnreport")

__all__ = ["__version__"]
