import pytest

from services.insight_engine.definitions import Framework
from src.constants import ValidationCode
from src.schemas.insights import ValidationIssue
from src.services.validation import (
    format_validation_messages,
    validate_framework_payload,
    validate_profile_payload,
)

TRAITS = {"openness": 50, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50}


def _codes(issues):
    return [issue.code for issue in issues]


# --- Errors ---

def test_valid_payload_with_low_completeness_warning(scenario_payload):
    report = validate_profile_payload(scenario_payload, current_year=2026)

    assert report.is_valid
    assert report.errors == []
    assert _codes(report.warnings) == [ValidationCode.LOW_COMPLETENESS.value]
    assert report.messages == ["Consider completing more frameworks for better insights"]


def test_full_payload_has_no_issues(full_payload):
    report = validate_profile_payload(full_payload, current_year=2026)
    assert report.is_valid
    assert report.warnings == []


def test_invalid_mbti_is_reported():
    report = validate_profile_payload({"mbti": "XXXX"})

    assert not report.is_valid
    assert len(report.errors) == 1
    assert report.errors[0].field == "mbti"
    assert report.errors[0].code == ValidationCode.INVALID_MBTI.value
    assert report.messages == ["mbti: Choose one of the 16 MBTI types"]


def test_duplicate_love_language_ranks():
    ranking = [{"type": language, "rank": 1} for language in
               ("gifts", "quality-time", "acts-of-service", "physical-touch", "words-of-affirmation")]
    report = validate_profile_payload({"loveLanguages": ranking})

    assert not report.is_valid
    assert report.errors[0].field == "loveLanguages"
    assert report.errors[0].code == ValidationCode.DUPLICATE_RANKS.value
    assert report.messages == ["Love languages must have unique rankings from 1-5"]


def test_nested_errors_use_dotted_paths():
    ranking = [{"type": "gifts", "rank": 6}]
    partial_traits = {key: value for key, value in TRAITS.items() if key != "neuroticism"}
    report = validate_profile_payload({"loveLanguages": ranking, "bigFive": partial_traits})

    fields = {issue.field: issue.code for issue in report.errors}
    assert fields["loveLanguages.0.rank"] == ValidationCode.TOO_BIG.value
    assert fields["bigFive.neuroticism"] == ValidationCode.MISSING.value


def test_every_error_is_reported_at_once():
    report = validate_profile_payload({"mbti": "nope", "enneagram": 12, "attachmentStyle": "clingy"})
    assert sorted(_codes(report.errors)) == sorted([
        ValidationCode.INVALID_MBTI.value,
        ValidationCode.INVALID_ENNEAGRAM.value,
        ValidationCode.INVALID_OPTION.value,
    ])
    assert report.warnings == []


def test_non_object_payload():
    report = validate_profile_payload(["not", "a", "profile"])
    assert not report.is_valid
    assert report.errors[0].field == "profile"
    assert report.errors[0].code == ValidationCode.INVALID_TYPE.value


# --- Warnings ---

@pytest.mark.parametrize("score, flagged", [(5, True), (9, True), (10, False), (90, False), (91, True)])
def test_extreme_scores_are_flagged(score, flagged):
    report = validate_profile_payload({"bigFive": {**TRAITS, "agreeableness": score}}, check_completeness=False)
    extreme = [issue for issue in report.warnings if issue.code == ValidationCode.EXTREME_SCORE.value]
    assert bool(extreme) is flagged
    if flagged:
        assert extreme[0].field == "bigFive.agreeableness"


def test_future_birth_year_is_unusual():
    report = validate_profile_payload({"chineseZodiac": {"year": 2050}}, current_year=2026, check_completeness=False)
    assert report.is_valid
    assert _codes(report.warnings) == [ValidationCode.UNUSUAL_YEAR.value]
    assert report.warnings[0].field == "chineseZodiac.year"


# --- Single framework ---

def test_single_framework_skips_completeness_warning():
    report = validate_framework_payload(Framework.MBTI, "enfp")
    assert report.is_valid
    assert report.warnings == []


def test_single_framework_error():
    report = validate_framework_payload(Framework.ATTACHMENT_STYLE, "clingy")
    assert not report.is_valid
    assert report.errors[0].field == "attachmentStyle"
    assert report.messages == ["attachmentStyle: Invalid option selected"]


def test_format_messages_falls_back_to_issue_message():
    issues = [ValidationIssue(field="x", message="Something odd", code="SOMETHING_ELSE")]
    assert format_validation_messages(issues) == ["Something odd"]


def test_oversized_integer_score_is_clamped_not_rejected():
    report = validate_profile_payload({"bigFive": {**TRAITS, "openness": 10 ** 400}}, current_year=2026)

    assert report.is_valid
    assert ValidationCode.EXTREME_SCORE.value in _codes(report.warnings)
    assert report.warnings[-1].field == "bigFive.openness"
