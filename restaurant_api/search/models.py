from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RestaurantPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurants: list[dict[str, Any]]
    total_pages: int = Field(..., ge=0, alias="totalPages")
    current_page: int = Field(..., ge=1, alias="currentPage")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    restaurants: int
