"""
JSON export of pipeline results for inspection and downstream tools.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from vulnreport.pipeline.core import PipelineResult


def result_to_dict(run: PipelineResult) -> dict[str, Any]:
    """Serializable view of a run; group and record order are preserved."""
    return {
        **run.result.to_dict(),
        "merged_rows": run.merged_rows,
        "headers": run.headers,
        "statistics": [asdict(item) for item in run.statistics],
    }


def write_result_json(run: PipelineResult, path: Path) -> Path:
    """
    Write a run to a UTF-8 JSON file.

    Args:
        run: Result of a pipeline run.
        path: Target file; parent directories are created.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(result_to_dict(run), f, ensure_ascii=False, indent=2)
    return path
