# src/constants.py
from enum import Enum


class ValidationCode(Enum):
    # Errors
    MISSING = "MISSING"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_OPTION = "INVALID_OPTION"
    TOO_SMALL = "TOO_SMALL"
    TOO_BIG = "TOO_BIG"
    INVALID_MBTI = "INVALID_MBTI"
    INVALID_ENNEAGRAM = "INVALID_ENNEAGRAM"
    DUPLICATE_RANKS = "DUPLICATE_RANKS"
    DUPLICATE_TYPES = "DUPLICATE_TYPES"
    INCOMPLETE_RANKING = "INCOMPLETE_RANKING"
    INVALID_VALUE = "INVALID_VALUE"
    # Warnings
    LOW_COMPLETENESS = "LOW_COMPLETENESS"
    EXTREME_SCORE = "EXTREME_SCORE"
    UNUSUAL_YEAR = "UNUSUAL_YEAR"


# pydantic error types mapped onto the codes clients see.
PYDANTIC_ERROR_CODES = {
    "missing": ValidationCode.MISSING,
    "enum": ValidationCode.INVALID_OPTION,
    "literal_error": ValidationCode.INVALID_OPTION,
    "greater_than_equal": ValidationCode.TOO_SMALL,
    "greater_than": ValidationCode.TOO_SMALL,
    "less_than_equal": ValidationCode.TOO_BIG,
    "less_than": ValidationCode.TOO_BIG,
    "int_type": ValidationCode.INVALID_TYPE,
    "int_parsing": ValidationCode.INVALID_TYPE,
    "int_from_float": ValidationCode.INVALID_TYPE,
    "string_type": ValidationCode.INVALID_TYPE,
    "list_type": ValidationCode.INVALID_TYPE,
    "dict_type": ValidationCode.INVALID_TYPE,
    "model_type": ValidationCode.INVALID_TYPE,
    "model_attributes_type": ValidationCode.INVALID_TYPE,
    "invalid_mbti": ValidationCode.INVALID_MBTI,
    "invalid_enneagram": ValidationCode.INVALID_ENNEAGRAM,
    "duplicate_ranks": ValidationCode.DUPLICATE_RANKS,
    "duplicate_types": ValidationCode.DUPLICATE_TYPES,
    "incomplete_ranking": ValidationCode.INCOMPLETE_RANKING,
}

# User-facing wording per code; "{field}" is filled in when formatting.
VALIDATION_MESSAGES = {
    ValidationCode.MISSING: "{field}: This value is required",
    ValidationCode.TOO_SMALL: "{field}: Value is too small",
    ValidationCode.TOO_BIG: "{field}: Value is too large",
    ValidationCode.INVALID_TYPE: "{field}: Invalid data type",
    ValidationCode.INVALID_OPTION: "{field}: Invalid option selected",
    ValidationCode.INVALID_MBTI: "{field}: Choose one of the 16 MBTI types",
    ValidationCode.INVALID_ENNEAGRAM: "{field}: Enneagram type must be between 1 and 9",
    ValidationCode.DUPLICATE_RANKS: "Love languages must have unique rankings from 1-5",
    ValidationCode.DUPLICATE_TYPES: "Each love language type must be selected exactly once",
    ValidationCode.INCOMPLETE_RANKING: "Rank all five love languages from 1-5",
}

LOW_COMPLETENESS_THRESHOLD = 30
EXTREME_SCORE_MARGIN = 10
