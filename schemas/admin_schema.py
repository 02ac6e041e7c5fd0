"""Schemas for administrative endpoints."""

from pydantic import BaseModel, Field
from typing import Optional


class GeneratePatternsRequest(BaseModel):
    """Options for regenerating the stored auto-generated patterns."""

    patterns_per_food: int = Field(3, ge=1, le=10, examples=[3], description="Patterns attempted per main food")
    target_protein: float = Field(20, ge=1, le=100, examples=[20], description="Protein target in grams")
    clear_existing: bool = Field(True, examples=[True], description="Delete existing auto-generated patterns first")


class GeneratePatternsResponse(BaseModel):
    generated_count: int
    processed_foods: int
    deleted_count: int
    duration_ms: int


class UpdateHistoryEntry(BaseModel):
    id: int
    update_type: str
    target_table: str
    record_count: Optional[int] = None
    status: Optional[str] = None
    error_message: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    created_by: Optional[str] = None
