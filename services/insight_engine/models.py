# services/insight_engine/models.py
# Profile input model, insight output models and the engine's exceptions.

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .definitions import (
    BIG_FIVE_MAX,
    BIG_FIVE_MIN,
    CHINESE_ZODIAC_MAX_YEAR,
    CHINESE_ZODIAC_MIN_YEAR,
    ENNEAGRAM_TYPES,
    MAX_INSIGHTS_PER_CATEGORY,
    RECOGNIZED_FRAMEWORKS,
    AttachmentStyle,
    BigFiveTrait,
    ChineseZodiacAnimal,
    ChineseZodiacElement,
    Framework,
    HumanDesignType,
    LoveLanguage,
    ZodiacSign,
)
from .personality import calculate_chinese_zodiac, normalize_mbti


class InsightEngineError(Exception):
    """Base class for insight engine errors."""
    pass


class InvalidProfileError(InsightEngineError, ValueError):
    """Raised when a raw payload cannot be turned into a Profile."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class RuleEvaluationError(InsightEngineError):
    """Raised when a single rule cannot be evaluated or rendered."""

    def __init__(self, rule_id: str, cause: Exception):
        super().__init__(f"Rule '{rule_id}' failed: {cause}")
        self.rule_id = rule_id
        self.cause = cause


_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _lower_stripped(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def sanitize_score(value: Any) -> int:
    """Coerces a Big Five score to an integer clamped to [0, 100]."""
    if isinstance(value, bool):
        raise ValueError("Score must be a number, not a boolean")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValueError(f"Score '{value}' is not numeric")
    if isinstance(value, int):
        # Ints may be too large for a float conversion.
        return min(max(value, BIG_FIVE_MIN), BIG_FIVE_MAX)
    if not isinstance(value, float):
        raise ValueError(f"Score must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError("Score must be a finite number")
    rounded = math.floor(value + 0.5)
    return int(min(max(rounded, BIG_FIVE_MIN), BIG_FIVE_MAX))


# --- Framework data ---

class BigFiveScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    openness: int
    conscientiousness: int
    extraversion: int
    agreeableness: int
    neuroticism: int

    @field_validator("openness", "conscientiousness", "extraversion",
                     "agreeableness", "neuroticism", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int:
        return sanitize_score(value)


class LoveLanguageRank(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: LoveLanguage
    rank: int = Field(..., ge=1, le=5)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        return _lower_stripped(value)


class ZodiacData(BaseModel):
    model_config = ConfigDict(frozen=True)

    sun: ZodiacSign
    moon: Optional[ZodiacSign] = None
    rising: Optional[ZodiacSign] = None

    @field_validator("sun", "moon", "rising", mode="before")
    @classmethod
    def normalize_sign(cls, value: Any) -> Any:
        return _lower_stripped(value)


class ChineseZodiacData(BaseModel):
    model_config = ConfigDict(frozen=True)

    animal: ChineseZodiacAnimal
    element: ChineseZodiacElement
    year: int = Field(..., ge=CHINESE_ZODIAC_MIN_YEAR, le=CHINESE_ZODIAC_MAX_YEAR)

    @model_validator(mode="before")
    @classmethod
    def derive_from_year(cls, data: Any) -> Any:
        """Fills in animal and element when only the birth year is given."""
        if not isinstance(data, dict):
            return data
        data = {key: _lower_stripped(value) for key, value in data.items()}
        year = data.get("year")
        if isinstance(year, str) and year.isdigit():
            year = int(year)
            data["year"] = year
        if data.get("animal") and data.get("element"):
            return data
        try:
            derived = calculate_chinese_zodiac(year)
        except ValueError:
            # Leave the year for field validation to report.
            return data
        data.setdefault("animal", derived["animal"])
        data.setdefault("element", derived["element"])
        return data


class HumanDesignData(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: HumanDesignType
    authority: Optional[str] = None
    profile: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return "-".join(value.strip().lower().split())
        return value


# --- Profile ---

_FRAMEWORK_FIELDS: Dict[Framework, str] = {
    Framework.BIG_FIVE: "big_five",
    Framework.MBTI: "mbti",
    Framework.ZODIAC: "zodiac",
    Framework.CHINESE_ZODIAC: "chinese_zodiac",
    Framework.HUMAN_DESIGN: "human_design",
    Framework.ATTACHMENT_STYLE: "attachment_style",
    Framework.LOVE_LANGUAGES: "love_languages",
    Framework.ENNEAGRAM: "enneagram",
}


class Profile(BaseModel):
    """
    A user's answers across the supported personality frameworks.

    Every framework is optional. Validation normalizes casing, clamps Big Five
    scores and rejects love-language rankings that are not a full ordering of
    the five types. The accessor methods (`trait`, `mbti_code`, ...) never raise
    and return None for missing or malformed data, so rules can be evaluated
    against instances built without validation.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True,
                              frozen=True, extra="ignore")

    user_id: Optional[str] = None
    timestamp: Optional[datetime] = None
    big_five: Optional[BigFiveScores] = None
    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    attachment_style: Optional[AttachmentStyle] = None
    love_languages: Optional[List[LoveLanguageRank]] = None
    zodiac: Optional[ZodiacData] = None
    chinese_zodiac: Optional[ChineseZodiacData] = None
    human_design: Optional[HumanDesignData] = None

    @model_validator(mode="before")
    @classmethod
    def accept_flat_shapes(cls, data: Any) -> Any:
        """Maps the flat forms older clients send onto the structured fields."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        sign = data.pop("zodiacSign", None)
        if sign is not None and data.get("zodiac") is None:
            data["zodiac"] = {"sun": sign}
        if isinstance(data.get("zodiac"), str):
            data["zodiac"] = {"sun": data["zodiac"]}
        for key in ("humanDesign", "human_design"):
            if isinstance(data.get(key), str):
                data[key] = {"type": data[key]}
        for key in ("chineseZodiac", "chinese_zodiac"):
            if isinstance(data.get(key), int) and not isinstance(data.get(key), bool):
                data[key] = {"year": data[key]}
        return data

    @field_validator("mbti", mode="before")
    @classmethod
    def validate_mbti(cls, value: Any) -> Any:
        if value is None:
            return None
        code = normalize_mbti(value)
        if code is None:
            raise PydanticCustomError(
                "invalid_mbti",
                "MBTI type must be one of the 16 four-letter codes, got {value}",
                {"value": repr(value)},
            )
        return code

    @field_validator("enneagram", mode="before")
    @classmethod
    def validate_enneagram(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or value.strip() not in ENNEAGRAM_TYPES:
            raise PydanticCustomError(
                "invalid_enneagram",
                "Enneagram type must be a digit from 1 to 9, got {value}",
                {"value": repr(value)},
            )
        return value.strip()

    @field_validator("attachment_style", mode="before")
    @classmethod
    def normalize_attachment(cls, value: Any) -> Any:
        return _lower_stripped(value)

    @field_validator("love_languages")
    @classmethod
    def validate_ranking(cls, value: Optional[List[LoveLanguageRank]]) -> Optional[List[LoveLanguageRank]]:
        if value is None:
            return None
        types = [entry.type for entry in value]
        ranks = [entry.rank for entry in value]
        if len(set(types)) != len(types):
            raise PydanticCustomError("duplicate_types", "Each love language may only appear once")
        if len(set(ranks)) != len(ranks):
            raise PydanticCustomError("duplicate_ranks", "Each love language rank may only be used once")
        if len(value) != len(LoveLanguage):
            raise PydanticCustomError(
                "incomplete_ranking",
                "All {expected} love languages must be ranked, got {actual}",
                {"expected": len(LoveLanguage), "actual": len(value)},
            )
        return sorted(value, key=lambda entry: entry.rank)

    @classmethod
    def from_payload(cls, payload: Any) -> "Profile":
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise InvalidProfileError(
                f"Profile payload failed validation with {e.error_count()} error(s)",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

    # --- Safe accessors ---

    def is_populated(self, framework: Framework) -> bool:
        return getattr(self, _FRAMEWORK_FIELDS[framework], None) is not None

    def populated_frameworks(self) -> List[Framework]:
        return [framework for framework in RECOGNIZED_FRAMEWORKS if self.is_populated(framework)]

    def has_any_data(self) -> bool:
        return bool(self.populated_frameworks()) or self.is_populated(Framework.ENNEAGRAM)

    def trait(self, trait: BigFiveTrait) -> Optional[int]:
        big_five = self.big_five
        if big_five is None:
            return None
        name = BigFiveTrait(trait).value
        if isinstance(big_five, dict):
            raw = big_five.get(name)
        else:
            raw = getattr(big_five, name, None)
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            return None
        if isinstance(raw, int):
            return raw if BIG_FIVE_MIN <= raw <= BIG_FIVE_MAX else None
        if not math.isfinite(raw) or not BIG_FIVE_MIN <= raw <= BIG_FIVE_MAX:
            return None
        return int(math.floor(raw + 0.5))

    def mbti_code(self) -> Optional[str]:
        return normalize_mbti(self.mbti)

    def enneagram_type(self) -> Optional[str]:
        value = self.enneagram.strip() if isinstance(self.enneagram, str) else None
        return value if value in ENNEAGRAM_TYPES else None

    def attachment(self) -> Optional[AttachmentStyle]:
        try:
            return AttachmentStyle(self.attachment_style) if self.attachment_style else None
        except ValueError:
            return None

    def human_design_type(self) -> Optional[HumanDesignType]:
        raw = getattr(self.human_design, "type", None)
        try:
            return HumanDesignType(raw) if raw else None
        except ValueError:
            return None

    def top_love_language(self) -> Optional[LoveLanguage]:
        """The rank-1 love language, only when the ranking is a complete ordering."""
        entries = self.love_languages
        if not isinstance(entries, (list, tuple)) or len(entries) != len(LoveLanguage):
            return None
        try:
            types = {LoveLanguage(getattr(entry, "type", None)) for entry in entries}
            ranks = {getattr(entry, "rank", None) for entry in entries}
        except ValueError:
            return None
        if len(types) != len(LoveLanguage) or ranks != set(range(1, len(LoveLanguage) + 1)):
            return None
        for entry in entries:
            if entry.rank == 1:
                return LoveLanguage(entry.type)
        return None


# --- Outputs ---

class Insight(BaseModel):
    model_config = _CAMEL_CONFIG

    id: str
    title: str
    description: str
    explanation: str
    actionable: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    source_frameworks: List[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    model_config = _CAMEL_CONFIG

    self_improvement: List[Insight] = Field(default_factory=list, max_length=MAX_INSIGHTS_PER_CATEGORY)
    strengths: List[Insight] = Field(default_factory=list, max_length=MAX_INSIGHTS_PER_CATEGORY)
    green_flags: List[Insight] = Field(default_factory=list, max_length=MAX_INSIGHTS_PER_CATEGORY)
    red_flags: List[Insight] = Field(default_factory=list, max_length=MAX_INSIGHTS_PER_CATEGORY)
    confidence: float = Field(..., ge=0.0, le=1.0)
    completeness: int = Field(..., ge=0, le=100)


class CompletenessReport(BaseModel):
    model_config = _CAMEL_CONFIG

    overall: int = Field(..., ge=0, le=100)
    frameworks: Dict[str, int]
    missing_frameworks: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
