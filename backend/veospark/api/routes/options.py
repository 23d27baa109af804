from fastapi import APIRouter

from veospark import schemas

router = APIRouter(prefix="/options", tags=["options"])


@router.get("/", response_model=schemas.FormOptions)
def get_form_options():
    return schemas.FormOptions(
        styles=list(schemas.VideoStyle),
        aspect_ratios=[r.value for r in schemas.VideoAspectRatio],
        motion_categories=schemas.MOTION_CATEGORIES,
        languages=list(schemas.Language),
    )
