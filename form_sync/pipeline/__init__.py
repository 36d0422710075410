"""Submission pipeline: gate, submit, side effects."""

from form_sync.config import FormConfig
from form_sync.pipeline.orchestrator import SubmissionOrchestrator, SubmissionPhase

__all__ = [
    "FormConfig",
    "SubmissionOrchestrator",
    "SubmissionPhase",
]
