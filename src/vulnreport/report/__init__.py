"""
Report output: Word document, console summary and JSON export.
"""

from vulnreport.report.console import ConsoleReporter
from vulnreport.report.export import result_to_dict, write_result_json
from vulnreport.report.word import DocxReportRenderer

__all__ = ["ConsoleReporter", "DocxReportRenderer", "result_to_dict", "write_result_json"]
