from datetime import date

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeCompatibilityRequest
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.compatibility_report import CompatibilityReport
from services.compatibility import orchestrator
from services.compatibility.errors import CompatibilityInputError
from services.compatibility.matcher_registry import loaded_matchers
from services.compatibility.work_history import aggregate_experience

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "matchers_loaded": loaded_matchers(),
    }


@router.post(
    "/compatibility/analyze",
    response_model=CompatibilityReport,
    response_model_by_alias=True,
)
@limiter.limit(settings.rate_limit)
async def analyze_compatibility(request: Request, body: AnalyzeCompatibilityRequest):
    profile = body.profile
    try:
        if body.work_history:
            if profile.experience:
                raise HTTPException(
                    status_code=422,
                    detail="Provide either profile.experience or workHistory, not both",
                )
            experience = aggregate_experience(body.work_history, body.as_of or date.today())
            profile = CandidateProfile(
                skills=profile.skills,
                experience=experience,
                education=profile.education,
            )
        return orchestrator.analyze(profile, body.requirements)
    except CompatibilityInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
