"""
Word report generation.

Writes a statistics table followed by one problem-report section per
group, in the order of the processing result.
"""

from datetime import datetime
from pathlib import Path

from docx import Document
from docx.document import Document as DocumentObject
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.table import _Cell
from docx.text.paragraph import Paragraph

from vulnreport.config.settings import ColumnsConfig, ReportConfig
from vulnreport.processing.models import Group, ProcessResult, StatisticItem
from vulnreport.processing.severity import SeverityClassifier
from vulnreport.report.sections import clean_text, code_text, first_value, path_text
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)

FONT_NAME = "宋体"
STATISTICS_HEADERS = ("序号", "问题名称", "严重性级别", "问题个数")


def _add_run(
    paragraph: Paragraph,
    text: str,
    *,
    bold: bool = False,
    size: Pt | None = None,
) -> None:
    """Append a run in the report font; newlines become line breaks."""
    run = paragraph.add_run(text.replace("\r\n", "\n"))
    run.bold = bold
    if size is not None:
        run.font.size = size
    run.font.name = FONT_NAME
    run._element.get_or_add_rPr().get_or_add_rFonts().set(qn("w:eastAsia"), FONT_NAME)


def _fill_cell(cell: _Cell, *paragraphs: str, bold: bool = False, center: bool = False) -> None:
    """Replace a cell's content with one paragraph per text."""
    first = cell.paragraphs[0]
    for i, text in enumerate(paragraphs):
        paragraph = first if i == 0 else cell.add_paragraph()
        _add_run(paragraph, text, bold=bold)
        if center:
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER


class DocxReportRenderer:
    """
    Renders a ProcessResult into a .docx problem report.

    Report numbers are the identifier tag followed by the group's
    1-based position plus the configured offset, zero-padded to 4 digits.
    """

    def __init__(
        self,
        report: ReportConfig,
        columns: ColumnsConfig | None = None,
        classifier: SeverityClassifier | None = None,
    ) -> None:
        """
        Initialize renderer.

        Args:
            report: Report metadata and output directory.
            columns: Columns holding the section fields.
            classifier: Classifier for the severity row's checkbox text.
        """
        self.report = report
        self.columns = columns or ColumnsConfig()
        self.classifier = classifier or SeverityClassifier()

    def default_output_path(self) -> Path:
        """Output file named after tag, version and the current Unix time."""
        timestamp = int(datetime.now().timestamp())
        name = f"{self.report.identifier_tag}_{self.report.code_version}_{timestamp}.docx"
        return self.report.output_dir / name

    def build(
        self,
        result: ProcessResult,
        statistics: list[StatisticItem],
    ) -> DocumentObject:
        """Build the report document in memory."""
        doc = Document()
        self._add_statistics_table(doc, statistics)

        for seq_num, (_, group) in enumerate(result.ordered_groups, start=1):
            self._add_group_section(doc, seq_num, group)
            log.debug("Rendered group", seq_num=seq_num, total=result.total_groups)

        return doc

    def render(
        self,
        result: ProcessResult,
        statistics: list[StatisticItem],
        output_path: Path | None = None,
    ) -> Path:
        """
        Write the report to disk.

        Args:
            result: Ordered processing result.
            statistics: Statistics rows for the summary table.
            output_path: Target file; defaults to default_output_path().

        Returns:
            Path of the written report.
        """
        output_path = output_path or self.default_output_path()
        output_path.parent.mkdir(parents=True, exist_ok=True)

        doc = self.build(result, statistics)
        doc.save(str(output_path))

        log.info("Report written", path=str(output_path), groups=result.total_groups)
        return output_path

    def _add_statistics_table(self, doc: DocumentObject, statistics: list[StatisticItem]) -> None:
        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        _add_run(title, "问题统计表格", bold=True, size=Pt(16))

        table = doc.add_table(rows=1, cols=len(STATISTICS_HEADERS))
        table.style = "Table Grid"
        for cell, header in zip(table.rows[0].cells, STATISTICS_HEADERS):
            _fill_cell(cell, header, bold=True)

        for item in statistics:
            cells = table.add_row().cells
            values = (
                str(item.seq_num),
                item.problem_name,
                item.severity_level,
                str(item.problem_count),
            )
            for cell, value in zip(cells, values):
                _fill_cell(cell, value, center=True)

        doc.add_paragraph()

    def _add_group_section(self, doc: DocumentObject, seq_num: int, group: Group) -> None:
        columns = self.columns
        report = self.report

        heading = doc.add_heading(level=3)
        _add_run(heading, f"{seq_num}、{group.problem_name}", bold=True, size=Pt(14))

        table = doc.add_table(rows=7, cols=4)
        table.style = "Table Grid"
        table.alignment = WD_TABLE_ALIGNMENT.CENTER

        rows = table.rows
        _fill_cell(rows[0].cells[0], "问题报告编号")
        _fill_cell(rows[0].cells[1], report.report_number(seq_num))
        _fill_cell(rows[0].cells[2], "软件版本")
        _fill_cell(rows[0].cells[3], report.code_version)
        _fill_cell(rows[1].cells[0], "测试人")
        _fill_cell(rows[1].cells[1], report.tester)
        _fill_cell(rows[1].cells[2], "测试时间")
        _fill_cell(rows[1].cells[3], report.test_time)

        spanned = [
            (
                "问题描述",
                (
                    "缺陷描述：",
                    first_value(group, columns.description),
                    clean_text(code_text(group.records, columns.code)),
                ),
            ),
            ("问题严重性级别", (self.classifier.classify(group.severity_text).display_text,)),
            ("相关文件路径", (clean_text(path_text(group.records, columns.path)),)),
            ("漏洞说明", (first_value(group, columns.vulnerability),)),
            ("整改建议", (first_value(group, columns.suggestion),)),
        ]
        for row, (label, texts) in zip(rows[2:], spanned):
            _fill_cell(row.cells[0], label)
            merged = row.cells[1].merge(row.cells[3])
            _fill_cell(merged, *texts)

        doc.add_paragraph()
