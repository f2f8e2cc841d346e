"""
Validation models - the verdicts produced by the scanners.

Every scanner returns data, never raises. The validator folds the
individual reports into a single ValidationVerdict.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class ErrorLocation(BaseModel):
    """
    Position of a syntax failure reported by a downstream parser.

    Only callers that have a real parse error set this; the local
    scanners report positions inside their message strings.
    """

    line: int = Field(..., ge=1, description="1-based line number")
    column: int = Field(..., ge=1, description="1-based column number")

    model_config = {"frozen": True}


class BalanceCheck(BaseModel):
    """Result of a delimiter or quote scan."""

    valid: bool = Field(..., description="True if every delimiter is closed")
    message: str = Field("", description="Failure description, empty when valid")

    model_config = {"frozen": True}


class SafetyReport(BaseModel):
    """Result of scanning for dangerous constructs."""

    errors: list[str] = Field(default_factory=list, description="Hard failures")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal concerns")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def safe(self) -> bool:
        """True if no hard errors were produced (warnings never count)."""
        return not self.errors


class HeuristicsReport(BaseModel):
    """Result of the heuristic syntax scan."""

    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ValidationVerdict(BaseModel):
    """
    Aggregated outcome of validating a pattern.

    Messages keep the order in which the checks ran.
    """

    errors: list[str] = Field(default_factory=list, description="Fatal problems")
    warnings: list[str] = Field(default_factory=list, description="Heuristic concerns")
    suggestions: list[str] = Field(default_factory=list, description="Improvement hints")
    error_location: ErrorLocation | None = Field(
        None, description="Downstream parse location, when known"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        """True iff there are no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Boolean conversion returns valid."""
        return self.valid

    def __str__(self) -> str:
        if self.valid and not self.warnings:
            return "Validation passed: no issues found"
        lines = [f"[ERROR] {e}" for e in self.errors]
        lines.extend(f"[WARNING] {w}" for w in self.warnings)
        return "\n".join(lines) if lines else "Validation passed"


class AutoFixResult(BaseModel):
    """Rewritten pattern text plus a description of each applied fix."""

    text: str = Field(..., description="The (possibly) rewritten pattern")
    fixes: list[str] = Field(default_factory=list, description="Applied fixes, in order")

    @property
    def changed(self) -> bool:
        """True if any fix was applied."""
        return bool(self.fixes)
