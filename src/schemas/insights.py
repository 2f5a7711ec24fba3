# src/schemas/insights.py
# Request/response shapes that exist only at the API boundary. The analysis
# result and completeness report come straight from the engine models.

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ValidationIssue(BaseModel):
    field: str
    message: str
    code: str


class ProfileValidationReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    messages: List[str] = Field(default_factory=list, description="User-facing wording for errors, then warnings")


class HealthResponse(BaseModel):
    status: str
    service: str
