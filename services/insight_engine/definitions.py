# services/insight_engine/definitions.py
# Static enumerations and weights shared by the profile model, the rule
# library and the analysis pass.

from enum import Enum
from typing import Dict, Tuple


class Framework(str, Enum):
    BIG_FIVE = "bigFive"
    MBTI = "mbti"
    ZODIAC = "zodiac"
    CHINESE_ZODIAC = "chineseZodiac"
    HUMAN_DESIGN = "humanDesign"
    ATTACHMENT_STYLE = "attachmentStyle"
    LOVE_LANGUAGES = "loveLanguages"
    ENNEAGRAM = "enneagram"


# Frameworks counted by completeness. Enneagram is stored but not counted.
RECOGNIZED_FRAMEWORKS: Tuple[Framework, ...] = (
    Framework.BIG_FIVE,
    Framework.MBTI,
    Framework.ZODIAC,
    Framework.CHINESE_ZODIAC,
    Framework.HUMAN_DESIGN,
    Framework.ATTACHMENT_STYLE,
    Framework.LOVE_LANGUAGES,
)

# Relative analytic weight of each framework; the informational ones carry none.
FRAMEWORK_WEIGHTS: Dict[Framework, float] = {
    Framework.ATTACHMENT_STYLE: 0.6,
    Framework.BIG_FIVE: 0.25,
    Framework.MBTI: 0.1,
    Framework.LOVE_LANGUAGES: 0.05,
    Framework.HUMAN_DESIGN: 0.0,
    Framework.ZODIAC: 0.0,
    Framework.CHINESE_ZODIAC: 0.0,
    Framework.ENNEAGRAM: 0.0,
}


class InsightCategory(str, Enum):
    SELF_IMPROVEMENT = "selfImprovement"
    STRENGTHS = "strengths"
    GREEN_FLAGS = "greenFlags"
    RED_FLAGS = "redFlags"


class RuleGroup(int, Enum):
    """Rule groups in evaluation order; the value is the selection priority."""
    ATTACHMENT = 1
    BIG_FIVE = 2
    TYPE_PATTERN = 3  # MBTI and cross-framework conjunctions
    LOVE_LANGUAGE = 4


MAX_INSIGHTS_PER_CATEGORY = 3


class BigFiveTrait(str, Enum):
    OPENNESS = "openness"
    CONSCIENTIOUSNESS = "conscientiousness"
    EXTRAVERSION = "extraversion"
    AGREEABLENESS = "agreeableness"
    NEUROTICISM = "neuroticism"


BIG_FIVE_MIN = 0
BIG_FIVE_MAX = 100


class AttachmentStyle(str, Enum):
    SECURE = "secure"
    ANXIOUS = "anxious"
    AVOIDANT = "avoidant"
    FEARFUL_AVOIDANT = "fearful-avoidant"


class LoveLanguage(str, Enum):
    WORDS_OF_AFFIRMATION = "words-of-affirmation"
    QUALITY_TIME = "quality-time"
    ACTS_OF_SERVICE = "acts-of-service"
    PHYSICAL_TOUCH = "physical-touch"
    GIFTS = "gifts"


class ZodiacSign(str, Enum):
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"


class ChineseZodiacAnimal(str, Enum):
    RAT = "rat"
    OX = "ox"
    TIGER = "tiger"
    RABBIT = "rabbit"
    DRAGON = "dragon"
    SNAKE = "snake"
    HORSE = "horse"
    GOAT = "goat"
    MONKEY = "monkey"
    ROOSTER = "rooster"
    DOG = "dog"
    PIG = "pig"


class ChineseZodiacElement(str, Enum):
    METAL = "metal"
    WATER = "water"
    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"


CHINESE_ZODIAC_MIN_YEAR = 1900
CHINESE_ZODIAC_MAX_YEAR = 2100


class HumanDesignType(str, Enum):
    MANIFESTOR = "manifestor"
    GENERATOR = "generator"
    MANIFESTING_GENERATOR = "manifesting-generator"
    PROJECTOR = "projector"
    REFLECTOR = "reflector"


MBTI_TYPES: Tuple[str, ...] = (
    "INTJ", "INTP", "ENTJ", "ENTP",
    "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ",
    "ISTP", "ISFP", "ESTP", "ESFP",
)

ENNEAGRAM_TYPES: Tuple[str, ...] = tuple(str(n) for n in range(1, 10))
