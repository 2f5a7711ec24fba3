# tests/models/test_profile_model.py

import math

import pytest
from pydantic import ValidationError

from services.insight_engine.definitions import (
    AttachmentStyle,
    BigFiveTrait,
    ChineseZodiacAnimal,
    ChineseZodiacElement,
    Framework,
    HumanDesignType,
    LoveLanguage,
    ZodiacSign,
)
from services.insight_engine.models import (
    BigFiveScores,
    InvalidProfileError,
    Profile,
    sanitize_score,
)

BASE_BIG_FIVE = {
    "openness": 50,
    "conscientiousness": 50,
    "extraversion": 50,
    "agreeableness": 50,
    "neuroticism": 50,
}


def _ranking(*types):
    return [{"type": language, "rank": rank} for rank, language in enumerate(types, start=1)]


# --- Big Five sanitization ---

@pytest.mark.parametrize("raw, expected", [
    (150, 100),
    (-10, 0),
    ("85", 85),
    (" 42 ", 42),
    (72.6, 73),
    (50.5, 51),
    (100.4, 100),
])
def test_big_five_scores_are_clamped_to_integers(raw, expected):
    scores = BigFiveScores(**{**BASE_BIG_FIVE, "openness": raw})
    assert scores.openness == expected


def test_big_five_clamping_survives_profile_round_trip():
    profile = Profile.model_validate({"bigFive": {**BASE_BIG_FIVE, "openness": 150, "neuroticism": -10}})
    assert profile.big_five.openness == 100
    assert profile.big_five.neuroticism == 0

    reread = Profile.model_validate(profile.model_dump(by_alias=True))
    assert reread.big_five.openness == 100
    assert reread.big_five.neuroticism == 0


@pytest.mark.parametrize("raw", ["abc", "", float("nan"), float("inf"), True, None, [50]])
def test_big_five_rejects_non_numeric_scores(raw):
    with pytest.raises(ValidationError):
        BigFiveScores(**{**BASE_BIG_FIVE, "agreeableness": raw})


def test_big_five_requires_all_five_traits():
    partial = dict(BASE_BIG_FIVE)
    del partial["neuroticism"]
    with pytest.raises(ValidationError) as excinfo:
        Profile.model_validate({"bigFive": partial})
    assert excinfo.value.errors()[0]["loc"] == ("bigFive", "neuroticism")


def test_sanitize_score_rejects_booleans():
    with pytest.raises(ValueError):
        sanitize_score(False)


@pytest.mark.parametrize("raw, expected", [(10 ** 400, 100), (-(10 ** 400), 0)])
def test_sanitize_score_clamps_integers_too_large_for_float(raw, expected):
    assert sanitize_score(raw) == expected
    profile = Profile.model_validate({"bigFive": {**BASE_BIG_FIVE, "openness": raw}})
    assert profile.big_five.openness == expected


# --- Categorical fields ---

def test_mbti_is_normalized_to_upper_case():
    assert Profile(mbti=" infj ").mbti == "INFJ"


@pytest.mark.parametrize("raw", ["XXXX", "INF", "INFJP", 1234])
def test_mbti_rejects_unknown_codes(raw):
    with pytest.raises(ValidationError) as excinfo:
        Profile(mbti=raw)
    assert excinfo.value.errors()[0]["type"] == "invalid_mbti"


def test_attachment_style_is_case_insensitive():
    assert Profile.model_validate({"attachmentStyle": "Fearful-Avoidant"}).attachment_style == AttachmentStyle.FEARFUL_AVOIDANT


def test_attachment_style_rejects_unknown_values():
    with pytest.raises(ValidationError):
        Profile.model_validate({"attachmentStyle": "clingy"})


@pytest.mark.parametrize("raw, expected", [(5, "5"), ("9", "9"), (" 1 ", "1")])
def test_enneagram_accepts_digits(raw, expected):
    assert Profile(enneagram=raw).enneagram == expected


@pytest.mark.parametrize("raw", [0, 10, "ten", True])
def test_enneagram_rejects_out_of_range(raw):
    with pytest.raises(ValidationError):
        Profile(enneagram=raw)


def test_flat_zodiac_sign_maps_to_sun():
    profile = Profile.model_validate({"zodiacSign": "Leo"})
    assert profile.zodiac.sun == ZodiacSign.LEO
    assert profile.zodiac.moon is None


def test_flat_human_design_type_is_accepted():
    profile = Profile.model_validate({"humanDesign": "Manifesting Generator"})
    assert profile.human_design.type == HumanDesignType.MANIFESTING_GENERATOR
    assert profile.human_design_type() == HumanDesignType.MANIFESTING_GENERATOR


def test_chinese_zodiac_is_derived_from_year():
    profile = Profile.model_validate({"chineseZodiac": {"year": 1990}})
    assert profile.chinese_zodiac.animal == ChineseZodiacAnimal.HORSE
    assert profile.chinese_zodiac.element == ChineseZodiacElement.METAL


def test_chinese_zodiac_accepts_bare_year():
    profile = Profile.model_validate({"chineseZodiac": 2000})
    assert profile.chinese_zodiac.animal == ChineseZodiacAnimal.DRAGON


def test_chinese_zodiac_keeps_explicit_values():
    profile = Profile.model_validate({"chineseZodiac": {"animal": "Tiger", "element": "water", "year": "1962"}})
    assert profile.chinese_zodiac.animal == ChineseZodiacAnimal.TIGER
    assert profile.chinese_zodiac.year == 1962


@pytest.mark.parametrize("year", [1899, 2101])
def test_chinese_zodiac_rejects_years_outside_range(year):
    with pytest.raises(ValidationError):
        Profile.model_validate({"chineseZodiac": {"year": year}})


def test_flat_chinese_zodiac_animal_is_rejected():
    with pytest.raises(ValidationError):
        Profile.model_validate({"chineseZodiac": "dragon"})


# --- Love languages ---

def test_love_languages_are_sorted_by_rank():
    shuffled = [
        {"type": "gifts", "rank": 5},
        {"type": "physical-touch", "rank": 1},
        {"type": "quality-time", "rank": 3},
        {"type": "acts-of-service", "rank": 2},
        {"type": "words-of-affirmation", "rank": 4},
    ]
    profile = Profile.model_validate({"loveLanguages": shuffled})
    assert [entry.rank for entry in profile.love_languages] == [1, 2, 3, 4, 5]
    assert profile.top_love_language() == LoveLanguage.PHYSICAL_TOUCH


def test_love_languages_reject_duplicate_ranks():
    ranking = _ranking("gifts", "quality-time", "acts-of-service", "physical-touch", "words-of-affirmation")
    ranking[1]["rank"] = 1
    with pytest.raises(ValidationError) as excinfo:
        Profile.model_validate({"loveLanguages": ranking})
    assert excinfo.value.errors()[0]["type"] == "duplicate_ranks"


def test_love_languages_reject_duplicate_types():
    ranking = _ranking("gifts", "gifts", "acts-of-service", "physical-touch", "words-of-affirmation")
    with pytest.raises(ValidationError) as excinfo:
        Profile.model_validate({"loveLanguages": ranking})
    assert excinfo.value.errors()[0]["type"] == "duplicate_types"


def test_love_languages_reject_partial_ranking():
    ranking = _ranking("gifts", "quality-time", "acts-of-service", "physical-touch")
    with pytest.raises(ValidationError) as excinfo:
        Profile.model_validate({"loveLanguages": ranking})
    assert excinfo.value.errors()[0]["type"] == "incomplete_ranking"


def test_top_love_language_ignores_unvalidated_partial_ranking():
    profile = Profile.model_construct(love_languages=[])
    assert profile.top_love_language() is None


# --- Accessors ---

def test_populated_frameworks_follow_recognized_order(full_profile):
    assert full_profile.populated_frameworks() == [
        Framework.BIG_FIVE,
        Framework.MBTI,
        Framework.ZODIAC,
        Framework.CHINESE_ZODIAC,
        Framework.HUMAN_DESIGN,
        Framework.ATTACHMENT_STYLE,
        Framework.LOVE_LANGUAGES,
    ]


def test_enneagram_counts_as_data_but_not_as_framework():
    profile = Profile(enneagram="4")
    assert profile.populated_frameworks() == []
    assert profile.has_any_data()
    assert not Profile().has_any_data()


def test_trait_accessor_treats_nan_as_missing():
    scores = BigFiveScores.model_construct(**{**BASE_BIG_FIVE, "openness": math.nan})
    profile = Profile.model_construct(big_five=scores)
    assert profile.trait(BigFiveTrait.OPENNESS) is None
    assert profile.trait(BigFiveTrait.NEUROTICISM) == 50


@pytest.mark.parametrize("raw, expected", [(75.7, 76), (75.4, 75), (50.5, 51), (10 ** 400, None), (-1, None)])
def test_trait_accessor_rounds_like_validation(raw, expected):
    profile = Profile.model_construct(big_five={**BASE_BIG_FIVE, "openness": raw})
    assert profile.trait(BigFiveTrait.OPENNESS) == expected


def test_accessors_tolerate_garbage_values():
    profile = Profile.model_construct(mbti="ZZZZ", attachment_style="clingy", big_five={"openness": "high"})
    assert profile.mbti_code() is None
    assert profile.attachment() is None
    assert profile.trait(BigFiveTrait.OPENNESS) is None


def test_from_payload_wraps_validation_errors():
    with pytest.raises(InvalidProfileError) as excinfo:
        Profile.from_payload({"mbti": "NOPE", "attachmentStyle": "clingy"})
    assert isinstance(excinfo.value, ValueError)
    assert len(excinfo.value.errors) == 2
    assert all("ctx" not in error for error in excinfo.value.errors)


def test_profile_accepts_snake_case_names():
    profile = Profile(attachment_style="secure", big_five=BASE_BIG_FIVE)
    assert profile.attachment() == AttachmentStyle.SECURE
    assert profile.trait(BigFiveTrait.CONSCIENTIOUSNESS) == 50
