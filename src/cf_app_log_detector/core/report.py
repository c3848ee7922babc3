"""Serializable classification report."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .classifier import ClassifierConfig, Verdict


class ClassificationReport(BaseModel):
    path: str = Field(description="Classified log file.")
    total_lines: int = Field(ge=0, description="Lines read before the scan ended.")
    matching_lines: int = Field(ge=0, description="Lines that parsed as CF application log.")
    percentage: int = Field(description="Floor of matching_lines / total_lines * 100.")
    trigger_percentage: int = Field(description="Threshold the percentage was compared to.")
    one_line_match: bool = Field(description="Whether a single matching line was enough.")
    matches: bool = Field(description="Final verdict.")

    @classmethod
    def from_verdict(cls, path: str, result: Verdict, config: ClassifierConfig) -> ClassificationReport:
        return cls(
            path=path,
            total_lines=result.total_lines,
            matching_lines=result.matching_lines,
            percentage=result.percentage,
            trigger_percentage=config.trigger_percentage,
            one_line_match=config.stop_on_first_match,
            matches=result.matches,
        )
