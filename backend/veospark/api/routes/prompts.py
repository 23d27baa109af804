from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from veospark import schemas
from veospark.api.dependencies import get_store, get_studio
from veospark.services.history_store import HistoryStore
from veospark.services.pipeline import GenerationError, PromptStudio

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.post("/", response_model=schemas.GeneratedPrompt,
             status_code=status.HTTP_201_CREATED)
async def generate_prompt(
    payload: schemas.GenerateRequest,
    studio: PromptStudio = Depends(get_studio),
    store: HistoryStore = Depends(get_store),
):
    try:
        result = await studio.build_and_submit(payload.request, payload.language)
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"category": e.category, "message": str(e)},
        )

    store.prepend(result)
    return result


@router.get("/", response_model=List[schemas.GeneratedPrompt])
def list_prompts(store: HistoryStore = Depends(get_store)):
    return store.load()


@router.get("/{prompt_id}/combined")
def get_combined_prompt(prompt_id: str, store: HistoryStore = Depends(get_store)):
    result = store.get(prompt_id)
    if not result:
        raise HTTPException(status_code=404, detail="Prompt not found")
    return {"id": result.id, "prompt": schemas.combined_prompt(result)}


@router.delete("/{prompt_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prompt(prompt_id: str, store: HistoryStore = Depends(get_store)):
    if not store.delete(prompt_id):
        raise HTTPException(status_code=404, detail="Prompt not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
