"""Application layer: the validation pipeline and the stateful session."""

from .validation_pipeline import (
    PipelineResult,
    export_table,
    match_structures,
    read_table,
    run_pipeline,
)
from .validation_session import ValidationSession

__all__ = [
    "PipelineResult",
    "ValidationSession",
    "export_table",
    "match_structures",
    "read_table",
    "run_pipeline",
]
