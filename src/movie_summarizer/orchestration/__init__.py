"""
Orchestrators that turn one user query into a saved movie summary.
"""

from .pipeline import SummaryPipeline, PipelineState

__all__ = [
    "SummaryPipeline",
    "PipelineState",
]
