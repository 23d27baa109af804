from fastapi import APIRouter, Depends

from veospark import schemas
from veospark.api.dependencies import get_store, get_studio
from veospark.core.config import settings
from veospark.services.history_store import HistoryStore
from veospark.services.pipeline import PromptStudio

router = APIRouter(prefix="/language", tags=["language"])


def _current(store: HistoryStore) -> schemas.Language:
    return store.get_language(schemas.Language(settings.DEFAULT_LANGUAGE))


@router.get("/", response_model=schemas.LanguageState)
def get_language(store: HistoryStore = Depends(get_store)):
    return schemas.LanguageState(language=_current(store))


@router.post("/switch", response_model=schemas.LanguageSwitchResponse)
async def switch_language(
    payload: schemas.LanguageSwitchRequest,
    studio: PromptStudio = Depends(get_studio),
    store: HistoryStore = Depends(get_store),
):
    target = payload.target_language or _current(store).other()

    outcome = await studio.switch_language(
        payload.topic, payload.details, store.load(), target
    )
    switched = outcome.value

    # The language tag switches even when content stayed untranslated
    store.save(switched.results)
    store.set_language(switched.language)

    return schemas.LanguageSwitchResponse(
        topic=switched.topic,
        details=switched.details,
        language=switched.language,
        results=switched.results,
        degraded=outcome.degraded,
    )
