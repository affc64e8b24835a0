"""Shopping list workflows."""

from shoplist.application.shopping import (
    FridgeAnalysisRequest,
    FridgeAnalysisResult,
    ProcessListRequest,
    ProcessListResult,
    add_suggestions,
    classify,
    process,
    run_fridge_analysis,
    run_process_list,
)

__all__ = [
    "ProcessListRequest",
    "ProcessListResult",
    "run_process_list",
    "process",
    "classify",
    "FridgeAnalysisRequest",
    "FridgeAnalysisResult",
    "run_fridge_analysis",
    "add_suggestions",
]
