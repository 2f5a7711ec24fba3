# src/services/validation.py
# Turns raw client payloads into a validation report: schema errors from the
# Profile model plus business-rule warnings on data that parsed cleanly.

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from services.insight_engine.completeness import calculate_completeness
from services.insight_engine.definitions import (
    BIG_FIVE_MAX,
    CHINESE_ZODIAC_MIN_YEAR,
    BigFiveTrait,
    Framework,
)
from services.insight_engine.models import Profile
from src.constants import (
    EXTREME_SCORE_MARGIN,
    LOW_COMPLETENESS_THRESHOLD,
    PYDANTIC_ERROR_CODES,
    VALIDATION_MESSAGES,
    ValidationCode,
)
from src.schemas.insights import ProfileValidationReport, ValidationIssue

logger = logging.getLogger(__name__)


def _field_path(location) -> str:
    return ".".join(str(part) for part in location) or "profile"


def _issue_from_pydantic(error: Dict[str, Any]) -> ValidationIssue:
    code = PYDANTIC_ERROR_CODES.get(error.get("type"), ValidationCode.INVALID_VALUE)
    message = error.get("msg", "Invalid value")
    # Messages from plain ValueErrors in validators arrive as "Value error, ...".
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return ValidationIssue(field=_field_path(error.get("loc", ())), message=message, code=code.value)


def _business_warnings(profile: Profile, current_year: int,
                       check_completeness: bool = True) -> List[ValidationIssue]:
    warnings: List[ValidationIssue] = []

    if check_completeness and calculate_completeness(profile) < LOW_COMPLETENESS_THRESHOLD:
        warnings.append(ValidationIssue(
            field="completeness",
            message="Consider completing more frameworks for better insights",
            code=ValidationCode.LOW_COMPLETENESS.value,
        ))

    if profile.big_five is not None:
        for trait in BigFiveTrait:
            score = profile.trait(trait)
            if score is None:
                continue
            if score < EXTREME_SCORE_MARGIN or score > BIG_FIVE_MAX - EXTREME_SCORE_MARGIN:
                warnings.append(ValidationIssue(
                    field=f"bigFive.{trait.value}",
                    message=f"Extreme {trait.value} score ({score}) - please verify accuracy",
                    code=ValidationCode.EXTREME_SCORE.value,
                ))

    if profile.chinese_zodiac is not None:
        year = profile.chinese_zodiac.year
        if year > current_year or year < CHINESE_ZODIAC_MIN_YEAR:
            warnings.append(ValidationIssue(
                field="chineseZodiac.year",
                message="Birth year seems unusual - please verify",
                code=ValidationCode.UNUSUAL_YEAR.value,
            ))

    return warnings


def validate_profile_payload(payload: Any, current_year: Optional[int] = None,
                             check_completeness: bool = True) -> ProfileValidationReport:
    """
    Validates a raw profile payload without raising.

    Schema problems are reported as errors. Warnings are only computed once the
    payload parses, since they need the normalized values.
    """
    if current_year is None:
        current_year = datetime.now(timezone.utc).year

    try:
        profile = Profile.model_validate(payload)
    except ValidationError as e:
        errors = [_issue_from_pydantic(error) for error in e.errors(include_url=False)]
        logger.info(f"Profile payload rejected with {len(errors)} error(s): {[issue.code for issue in errors]}")
        return ProfileValidationReport(is_valid=False, errors=errors, messages=format_validation_messages(errors))

    warnings = _business_warnings(profile, current_year, check_completeness)
    return ProfileValidationReport(
        is_valid=True,
        warnings=warnings,
        messages=format_validation_messages(warnings),
    )


def validate_framework_payload(framework: Framework, payload: Any) -> ProfileValidationReport:
    """Validates a single framework's data in isolation, e.g. one assessment step."""
    return validate_profile_payload({framework.value: payload}, check_completeness=False)


def format_validation_messages(issues: List[ValidationIssue]) -> List[str]:
    messages = []
    for issue in issues:
        try:
            template = VALIDATION_MESSAGES.get(ValidationCode(issue.code))
        except ValueError:
            template = None
        if template:
            messages.append(template.format(field=issue.field))
        else:
            messages.append(issue.message or f"Validation error in {issue.field}")
    return messages
