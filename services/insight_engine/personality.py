# services/insight_engine/personality.py
# Small derivations over framework values (Chinese zodiac from a year, MBTI letters).

from typing import Dict, Optional

from .definitions import (
    CHINESE_ZODIAC_MAX_YEAR,
    CHINESE_ZODIAC_MIN_YEAR,
    ChineseZodiacAnimal,
    ChineseZodiacElement,
    MBTI_TYPES,
)

# 1900 opens a metal-rat cycle; animals turn yearly, elements every two years.
_ANIMAL_CYCLE = list(ChineseZodiacAnimal)
_ELEMENT_CYCLE = list(ChineseZodiacElement)


def calculate_chinese_zodiac(year: int) -> Dict[str, object]:
    """Returns the animal and element for a Gregorian year in the supported range."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValueError(f"Year must be an integer, got {year!r}")
    if not CHINESE_ZODIAC_MIN_YEAR <= year <= CHINESE_ZODIAC_MAX_YEAR:
        raise ValueError(
            f"Year {year} is outside the supported range "
            f"{CHINESE_ZODIAC_MIN_YEAR}-{CHINESE_ZODIAC_MAX_YEAR}"
        )
    offset = year - CHINESE_ZODIAC_MIN_YEAR
    return {
        "animal": _ANIMAL_CYCLE[offset % 12],
        "element": _ELEMENT_CYCLE[(offset % 10) // 2],
        "year": year,
    }


def normalize_mbti(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    code = value.strip().upper()
    return code if code in MBTI_TYPES else None

