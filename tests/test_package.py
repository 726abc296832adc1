"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import vulnreport

    assert vulnreport.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from vulnreport.config import (
        AppConfig,
        ColumnsConfig,
        ReadingConfig,
        ReportConfig,
        SeverityConfig,
        load_config,
    )

    assert AppConfig is not None
    assert ColumnsConfig is not None
    assert ReadingConfig is not None
    assert ReportConfig is not None
    assert SeverityConfig is not None
    assert load_config is not None


def test_pipeline_module_imports() -> None:
    """Verify pipeline and processing exports are available."""
    from vulnreport.pipeline import ProgressRecorder, ReportPipeline, run_pipeline
    from vulnreport.processing import (
        SeverityClassifier,
        deduplicate,
        group_records,
        normalize_rows,
        order_groups,
        summarize,
    )

    assert ReportPipeline is not None
    assert ProgressRecorder is not None
    assert run_pipeline is not None
    assert SeverityClassifier is not None
    assert deduplicate is not None
    assert group_records is not None
    assert normalize_rows is not None
    assert order_groups is not None
    assert summarize is not None
