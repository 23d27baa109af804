from .options import CameraMotion, Language, VideoAspectRatio, VideoStyle, MOTION_CATEGORIES
from .prompt import (
    PLACEHOLDER,
    Character,
    GeneratedPrompt,
    ProductionNote,
    PromptRequest,
    Shot,
    combined_prompt,
    toggle_motion,
)
from .api import (
    CinematicDesign,
    FormOptions,
    GenerateRequest,
    LanguageState,
    LanguageSwitchRequest,
    LanguageSwitchResponse,
    SuggestRequest,
    SuggestResponse,
)

__all__ = [
    "CameraMotion",
    "Language",
    "VideoAspectRatio",
    "VideoStyle",
    "MOTION_CATEGORIES",
    "PLACEHOLDER",
    "Character",
    "GeneratedPrompt",
    "ProductionNote",
    "PromptRequest",
    "Shot",
    "combined_prompt",
    "toggle_motion",
    "CinematicDesign",
    "FormOptions",
    "GenerateRequest",
    "LanguageState",
    "LanguageSwitchRequest",
    "LanguageSwitchResponse",
    "SuggestRequest",
    "SuggestResponse",
]
