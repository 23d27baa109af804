# mcp_server.py
import sys
from pathlib import Path
from typing import List, Optional

# Add backend directory to Python path
backend_dir = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_dir))

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from veospark.core.config import settings
from veospark.db import Base, SessionLocal, engine
from veospark import models  # noqa: F401
from veospark.schemas import CameraMotion, Language, PromptRequest, VideoAspectRatio, VideoStyle
from veospark.services.history_store import HistoryStore
from veospark.services.llm import get_text_generator
from veospark.services.pipeline import GenerationError, PromptStudio

# Ensure all tables are created
Base.metadata.create_all(bind=engine)

# Initialize the MCP Server
mcp = FastMCP("VeoSparkPromptStudio")
studio = PromptStudio(get_text_generator(settings), settings)


@mcp.tool()
async def generate_video_prompt(
    topic: str,
    style: str = VideoStyle.CINEMATIC.value,
    aspect_ratio: str = VideoAspectRatio.WIDE_16_9.value,
    motion: Optional[List[str]] = None,
    total_duration: str = "",
    cut_duration: str = "",
    details: str = "",
    language: Optional[str] = None,
) -> dict:
    """
    Expands a short concept into a multi-shot text-to-video prompt and stores it in history.

    Args:
        topic: The concept, e.g. "a cat in rain".
        style: One of the VideoStyle values (e.g. "Cinematic", "Anime").
        aspect_ratio: e.g. "16:9", "9:16".
        motion: Camera setups, e.g. ["Drone Flyover", "Slow Motion"].
        total_duration: e.g. "10s" or "1m".
        cut_duration: Length of each shot, e.g. "5s".
        details: Optional extra direction.
        language: "en" or "ko"; defaults to the stored language.

    Returns:
        The generated prompt record (camelCase keys), or {"error": ...}.
    """
    db = SessionLocal()
    try:
        store = HistoryStore(db)
        lang = Language(language) if language else store.get_language(Language(settings.DEFAULT_LANGUAGE))
        request = PromptRequest(
            topic=topic,
            style=style,
            aspect_ratio=aspect_ratio,
            motion=motion or [CameraMotion.DRONE_FLYOVER.value],
            total_duration=total_duration,
            cut_duration=cut_duration,
            details=details or None,
        )
        result = await studio.build_and_submit(request, lang)
        store.prepend(result)
        return result.to_record()
    except (ValidationError, ValueError) as e:
        return {"error": f"Invalid request: {e}"}
    except GenerationError as e:
        return {"error": f"[{e.category}] {e}"}
    finally:
        db.close()


@mcp.tool()
async def suggest_details(topic: str, style: str = VideoStyle.CINEMATIC.value, language: str = "ko") -> str:
    """Suggests one sentence of lighting/color/atmosphere direction for the topic (empty on failure)."""
    try:
        video_style, output_language = VideoStyle(style), Language(language)
    except ValueError as e:
        print(f"[Suggest] Unknown option, no suggestion: {e}")
        return ""
    outcome = await studio.suggest_details(topic, video_style, output_language)
    return outcome.value


@mcp.tool()
async def switch_language(topic: str = "", details: str = "", target_language: Optional[str] = None) -> dict:
    """
    Switches the working language, translating the form fields and the most recent results.
    Content that fails to translate is kept as-is; the language switches regardless.
    """
    db = SessionLocal()
    try:
        store = HistoryStore(db)
        current = store.get_language(Language(settings.DEFAULT_LANGUAGE))
        target = Language(target_language) if target_language else current.other()
        outcome = await studio.switch_language(topic, details, store.load(), target)
        store.save(outcome.value.results)
        store.set_language(target)
        return {
            "topic": outcome.value.topic,
            "details": outcome.value.details,
            "language": target.value,
            "degraded": outcome.degraded,
        }
    finally:
        db.close()


if __name__ == "__main__":
    mcp.run()
