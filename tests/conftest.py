import pytest

from services.insight_engine.ids import SequentialInsightIdGenerator
from services.insight_engine.models import Profile

# Profile used throughout: high openness and neuroticism, low conscientiousness,
# anxious attachment.
SCENARIO_PAYLOAD = {
    "bigFive": {
        "openness": 80,
        "conscientiousness": 30,
        "extraversion": 70,
        "agreeableness": 50,
        "neuroticism": 75,
    },
    "attachmentStyle": "anxious",
}

LOVE_LANGUAGES_QUALITY_TIME_FIRST = [
    {"type": "quality-time", "rank": 1},
    {"type": "words-of-affirmation", "rank": 2},
    {"type": "physical-touch", "rank": 3},
    {"type": "acts-of-service", "rank": 4},
    {"type": "gifts", "rank": 5},
]

FULL_PAYLOAD = {
    "userId": "user-123",
    "bigFive": {
        "openness": 82,
        "conscientiousness": 78,
        "extraversion": 72,
        "agreeableness": 80,
        "neuroticism": 20,
    },
    "mbti": "INFJ",
    "enneagram": "2",
    "attachmentStyle": "secure",
    "loveLanguages": LOVE_LANGUAGES_QUALITY_TIME_FIRST,
    "zodiac": {"sun": "leo", "moon": "pisces", "rising": "virgo"},
    "chineseZodiac": {"animal": "horse", "element": "metal", "year": 1990},
    "humanDesign": {"type": "projector", "authority": "splenic", "profile": "4/6"},
}


@pytest.fixture
def scenario_profile() -> Profile:
    return Profile.model_validate(SCENARIO_PAYLOAD)


@pytest.fixture
def full_profile() -> Profile:
    return Profile.model_validate(FULL_PAYLOAD)


@pytest.fixture
def empty_profile() -> Profile:
    return Profile()


@pytest.fixture
def sequential_ids() -> SequentialInsightIdGenerator:
    return SequentialInsightIdGenerator()


@pytest.fixture
def scenario_payload() -> dict:
    return {key: (dict(value) if isinstance(value, dict) else value) for key, value in SCENARIO_PAYLOAD.items()}


@pytest.fixture
def full_payload() -> dict:
    return {key: (dict(value) if isinstance(value, dict) else value) for key, value in FULL_PAYLOAD.items()}
