"""
Text building blocks for report sections.

Each group's section lists every member finding's code snippet and file
path; descriptive fields come from the group's first finding.
"""

from vulnreport.processing.models import Group, Record

PATH_PREFIX = "root"


def clean_text(text: str) -> str:
    """Drop escaped carriage returns left by Excel and shrink wide indents."""
    return text.replace("_x000D_", "").replace("      ", "    ").strip()


def _value(record: Record, column: str) -> str:
    return record.get(column) or ""


def _strip_prefix(text: str, prefix: str) -> str:
    """Remove every leading repetition of prefix."""
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def first_value(group: Group, column: str) -> str:
    """Value of a column in the group's first record, "" if absent."""
    if not group.records:
        return ""
    return _value(group.records[0], column)


def code_text(records: list[Record], column: str) -> str:
    """Numbered code snippets of all findings in a group."""
    text = "".join(
        f"缺陷{i}相关代码如下：\r{_value(record, column)}\r\n"
        for i, record in enumerate(records, start=1)
    )
    return text.strip()


def path_text(records: list[Record], column: str) -> str:
    """Numbered file paths of all findings in a group, scan root prefix removed."""
    text = "".join(
        f"缺陷{i}文件路径：\r{_strip_prefix(_value(record, column), PATH_PREFIX)}\r\n"
        for i, record in enumerate(records, start=1)
    )
    return text.strip()
