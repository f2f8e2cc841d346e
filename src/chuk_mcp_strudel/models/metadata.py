"""
Pattern metadata - structural facts derived from pattern text.

Recomputed on every call; nothing here is cached.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PatternMetadata(BaseModel):
    """
    Lightweight structural summary of a pattern.

    Used for display and for comparing patterns, not for correctness.
    """

    bpm: float | None = Field(None, description="Tempo from the first tempo call, if any")
    complexity: float = Field(0.0, ge=0.0, le=1.0, description="Bounded complexity score")
    events_per_cycle: int = Field(0, ge=0, description="Top-level slots in the first sequence")
    unique_values: set[str] = Field(default_factory=set, description="Distinct non-rest values")
    functions_used: list[str] = Field(
        default_factory=list, description="Distinct call names in first-seen order"
    )
    is_stack: bool = Field(False, description="Uses parallel grouping")
    uses_sound: bool = Field(False, description="Uses s()/sound()")
    uses_note: bool = Field(False, description="Uses note()")
