from fastapi import APIRouter, Depends

from veospark import schemas
from veospark.api.dependencies import get_studio
from veospark.services.pipeline import PromptStudio, append_suggestion

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("/details", response_model=schemas.SuggestResponse)
async def suggest_details(
    payload: schemas.SuggestRequest,
    studio: PromptStudio = Depends(get_studio),
):
    outcome = await studio.suggest_details(payload.topic, payload.style, payload.language)
    return schemas.SuggestResponse(
        suggestion=outcome.value,
        details=append_suggestion(payload.current_details, outcome.value),
        degraded=outcome.degraded,
    )


@router.post("/design", response_model=schemas.CinematicDesign)
async def cinematic_design(
    payload: schemas.SuggestRequest,
    studio: PromptStudio = Depends(get_studio),
):
    outcome = await studio.generate_cinematic_design(payload.topic, payload.style, payload.language)
    return outcome.value
