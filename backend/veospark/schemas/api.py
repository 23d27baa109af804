# veospark/schemas/api.py

from typing import Dict, List, Optional

from pydantic import Field

from .options import CameraMotion, Language, VideoStyle
from .prompt import CamelModel, GeneratedPrompt, PromptRequest


class GenerateRequest(CamelModel):
    request: PromptRequest
    language: Language = Language.ko


class SuggestRequest(CamelModel):
    topic: str
    style: VideoStyle = VideoStyle.CINEMATIC
    language: Language = Language.ko
    # When given, the suggestion is appended to these details
    current_details: Optional[str] = None


class SuggestResponse(CamelModel):
    suggestion: str
    details: str
    degraded: bool = False


class CinematicDesign(CamelModel):
    details: str = ""
    motion: List[CameraMotion] = Field(default_factory=list)


class LanguageSwitchRequest(CamelModel):
    topic: str = ""
    details: str = ""
    target_language: Optional[Language] = None


class LanguageSwitchResponse(CamelModel):
    topic: str
    details: str
    language: Language
    results: List[GeneratedPrompt]
    degraded: bool = False


class LanguageState(CamelModel):
    language: Language


class FormOptions(CamelModel):
    styles: List[VideoStyle]
    aspect_ratios: List[str]
    motion_categories: Dict[str, List[CameraMotion]]
    languages: List[Language]
