from bytary.pipeline.config import LayoutConfig, PipelineConfig
from bytary.pipeline.runner import (
    conversion_path,
    convert_stream,
    describe_formatting,
    describe_operation,
    report_plan,
    run,
)

__all__ = [
    "LayoutConfig",
    "PipelineConfig",
    "conversion_path",
    "convert_stream",
    "describe_formatting",
    "describe_operation",
    "report_plan",
    "run",
]
