"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Column positions, severity vocabulary and report metadata are never
hardcoded in processing code.
"""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

_COLUMN_NAME = re.compile(r"^[A-Z]{1,3}$")


def _check_column(v: str) -> str:
    """Normalize and validate a spreadsheet-style column name."""
    v = v.strip().upper()
    if not _COLUMN_NAME.match(v):
        msg = f"Column must be a spreadsheet column name like 'B' or 'AA', got: {v!r}"
        raise ValueError(msg)
    return v


class SeverityConfig(BaseModel):
    """Keyword sets used to classify free-text severity labels."""

    model_config = ConfigDict(frozen=True)

    high_keywords: list[str] = Field(
        default_factory=lambda: ["高危", "高", "critical", "high"],
        min_length=1,
        description="Substrings that mark a label as high risk",
    )
    medium_keywords: list[str] = Field(
        default_factory=lambda: ["中危", "中", "medium", "moderate"],
        min_length=1,
        description="Substrings that mark a label as medium risk",
    )
    low_keywords: list[str] = Field(
        default_factory=lambda: ["低危", "低", "low"],
        min_length=1,
        description="Substrings that mark a label as low risk",
    )

    @field_validator("high_keywords", "medium_keywords", "low_keywords")
    @classmethod
    def validate_keywords(cls, v: list[str]) -> list[str]:
        """Reject blank keywords, which would match every label."""
        cleaned = [k.strip() for k in v]
        if any(not k for k in cleaned):
            msg = "Severity keywords must not be blank"
            raise ValueError(msg)
        return cleaned


class ColumnsConfig(BaseModel):
    """Positional column layout of the finding spreadsheets."""

    model_config = ConfigDict(frozen=True)

    problem: str = Field(default="B", description="Column holding the problem name")
    severity: str = Field(default="D", description="Column holding the severity label")
    dedup_key_width: int = Field(
        default=7,
        ge=1,
        description="Number of leading columns forming the duplicate key",
    )
    separator: str = Field(
        default="|", min_length=1, description="Separator used in composite keys"
    )

    # Columns read by the report renderer
    description: str = Field(default="B", description="Defect description column")
    path: str = Field(default="I", description="Affected file path column")
    code: str = Field(default="J", description="Affected code snippet column")
    vulnerability: str = Field(default="K", description="Vulnerability explanation column")
    suggestion: str = Field(default="N", description="Remediation suggestion column")

    @field_validator(
        "problem", "severity", "description", "path", "code", "vulnerability", "suggestion"
    )
    @classmethod
    def validate_column(cls, v: str) -> str:
        """Ensure column names follow spreadsheet naming."""
        return _check_column(v)


class ReadingConfig(BaseModel):
    """Source reading configuration."""

    model_config = ConfigDict(frozen=True)

    parallel: bool = Field(default=False, description="Read sources concurrently")
    max_workers: int = Field(default=4, ge=1, le=32)


class ReportConfig(BaseModel):
    """Metadata printed into the generated report."""

    model_config = ConfigDict(frozen=True)

    identifier_tag: str = Field(default="WT", description="Prefix of problem report numbers")
    number_offset: int = Field(
        default=0, ge=0, description="Added to each group's sequence number"
    )
    test_time: str = Field(default="", description="Test date shown in each section")
    code_version: str = Field(default="", description="Software version under test")
    tester: str = Field(default="", description="Name of the tester")
    output_dir: Path = Field(default=Path("./output"), description="Report directory")

    def report_number(self, seq_num: int) -> str:
        """Problem report number for the group at 1-based position seq_num."""
        return f"{self.identifier_tag}{seq_num + self.number_offset:04d}"


class AppConfig(BaseModel):
    """Complete tool configuration.

    Every section has defaults, so ``AppConfig()`` reproduces the standard
    spreadsheet layout without a configuration file.
    """

    model_config = ConfigDict(frozen=True)

    sources: list[Path] = Field(
        default_factory=list, description="Spreadsheets to merge, in order"
    )
    severity: SeverityConfig = Field(default_factory=SeverityConfig)
    columns: ColumnsConfig = Field(default_factory=ColumnsConfig)
    reading: ReadingConfig = Field(default_factory=ReadingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
