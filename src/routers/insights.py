from fastapi import APIRouter, Body, Depends, HTTPException
from typing import Any, Dict
import logging

from config.settings import AppSettings, get_settings
from services.insight_engine.analysis import AnalysisEngine
from services.insight_engine.definitions import Framework
from services.insight_engine.models import (
    AnalysisResult,
    CompletenessReport,
    InvalidProfileError,
    Profile,
)
from src.schemas.insights import ProfileValidationReport
from src.services.validation import validate_framework_payload, validate_profile_payload

router = APIRouter()
logger = logging.getLogger(__name__)

_engine_cache: Dict[tuple, AnalysisEngine] = {}


def get_analysis_engine(settings: AppSettings = Depends(get_settings)) -> AnalysisEngine:
    # Engines are stateless, so one per settings combination is shared across requests.
    key = (settings.insights_per_category, settings.fallback_for_empty_profile)
    if key not in _engine_cache:
        _engine_cache[key] = AnalysisEngine(
            quota=settings.insights_per_category,
            fallback_for_empty_profile=settings.fallback_for_empty_profile,
        )
    return _engine_cache[key]


@router.post("/insights/analyze", response_model=AnalysisResult)
def analyze_profile(
    payload: Dict[str, Any] = Body(...),
    engine: AnalysisEngine = Depends(get_analysis_engine),
):
    """
    Runs the full analysis for a profile and returns up to three insights per
    category together with the overall confidence and completeness.
    """
    try:
        profile = Profile.from_payload(payload)
        return engine.generate_insights(profile)
    except InvalidProfileError as e:
        logger.info(f"Invalid profile: {e}")
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    except Exception as e:
        logger.exception(f"Unexpected error during insight generation: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("/profile/completeness", response_model=CompletenessReport)
def profile_completeness(
    payload: Dict[str, Any] = Body(...),
    engine: AnalysisEngine = Depends(get_analysis_engine),
):
    try:
        return engine.validate_completeness(Profile.from_payload(payload))
    except InvalidProfileError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    except Exception as e:
        logger.exception(f"Unexpected error during completeness check: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.post("/profile/validate", response_model=ProfileValidationReport)
def validate_profile(payload: Dict[str, Any] = Body(...)):
    """Reports every validation error and warning for a raw payload; always 200."""
    return validate_profile_payload(payload)


@router.post("/profile/validate/{framework}", response_model=ProfileValidationReport)
def validate_framework(framework: Framework, payload: Any = Body(...)):
    return validate_framework_payload(framework, payload)
