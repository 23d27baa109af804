# veospark/schemas/prompt.py

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .options import CameraMotion, VideoAspectRatio, VideoStyle

PLACEHOLDER = "N/A"


class CamelModel(BaseModel):
    """Python attributes in snake_case, wire/persisted keys in camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PromptRequest(CamelModel):
    topic: str = Field(..., min_length=1)
    style: VideoStyle = VideoStyle.CINEMATIC
    aspect_ratio: VideoAspectRatio = VideoAspectRatio.WIDE_16_9
    motion: List[CameraMotion] = Field(
        default_factory=lambda: [CameraMotion.DRONE_FLYOVER], min_length=1
    )
    total_duration: str = ""
    cut_duration: str = ""
    details: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("topic must not be blank")
        return v


class Character(CamelModel):
    name: str = ""
    description: str = ""


class Shot(CamelModel):
    id: str
    index: int
    visual_prompt: str = ""
    technical_prompt: str = ""
    duration: str = ""
    characters: List[Character] = Field(default_factory=list)
    dialogue: str = ""
    lip_sync: str = ""
    bgm: str = ""
    sfx: str = ""


class ProductionNote(CamelModel):
    director_vision: str = PLACEHOLDER
    cinematography: str = PLACEHOLDER
    art_direction: str = PLACEHOLDER
    sound_design: str = PLACEHOLDER
    editing_style: str = PLACEHOLDER


class GeneratedPrompt(CamelModel):
    id: str
    title: str = ""
    visual_prompt: str = ""
    technical_prompt: str = ""
    negative_prompt: Optional[str] = None
    narration: str = ""
    characters: List[Character] = Field(default_factory=list)
    production_note: ProductionNote = Field(default_factory=ProductionNote)
    shots: List[Shot] = Field(default_factory=list)
    timestamp: int
    original_request: PromptRequest

    def to_record(self) -> dict:
        """Current persisted shape (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)


def toggle_motion(selected: List[CameraMotion], motion: CameraMotion) -> List[CameraMotion]:
    """Add or remove a motion. Removing the last remaining motion is a no-op."""
    if motion in selected:
        if len(selected) == 1:
            return list(selected)
        return [m for m in selected if m != motion]
    return [*selected, motion]


def combined_prompt(result: GeneratedPrompt) -> str:
    """One-line prompt for tools that take a single text field."""
    req = result.original_request
    motions = ", ".join(m.value for m in req.motion)
    return (
        f"{result.visual_prompt} --style {req.style.value} "
        f"--ar {req.aspect_ratio.value} --motion {motions}. "
        f"Technical details: {result.technical_prompt}"
    )
