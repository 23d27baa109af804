# veospark/services/request_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from veospark.core.config import settings
from veospark.core.durations import parse_duration, target_narration_words, target_shot_count
from veospark.schemas import Language, PromptRequest

_CHARACTER_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING", "description": "Character name or identifier (e.g. 'The Detective')."},
        "description": {"type": "STRING", "description": "Observable appearance: clothing, build, colors, posture."},
    },
    "required": ["name", "description"],
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING", "description": "A short, catchy title for the video concept."},
        "visualPrompt": {"type": "STRING", "description": "Main descriptive prompt: subject, action, environment, atmosphere."},
        "technicalPrompt": {"type": "STRING", "description": "Camera angles, lighting, film stock, render engine, resolution."},
        "negativePrompt": {"type": "STRING", "description": "Elements to exclude (blur, distortion, low quality)."},
        "narration": {"type": "STRING", "description": "Voiceover script with bracketed emotion/tone tags, e.g. [Calm]."},
        "characters": {"type": "ARRAY", "items": _CHARACTER_SCHEMA},
        "productionNote": {
            "type": "OBJECT",
            "properties": {
                "directorVision": {"type": "STRING"},
                "cinematography": {"type": "STRING"},
                "artDirection": {"type": "STRING"},
                "soundDesign": {"type": "STRING"},
                "editingStyle": {"type": "STRING"},
            },
            "required": ["directorVision", "cinematography", "artDirection", "soundDesign", "editingStyle"],
        },
        "shots": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "index": {"type": "INTEGER", "description": "Shot number (1, 2, 3...)"},
                    "visualPrompt": {"type": "STRING"},
                    "technicalPrompt": {"type": "STRING"},
                    "duration": {"type": "STRING", "description": "Duration of this shot (e.g. '3s')."},
                    "bgm": {"type": "STRING", "description": "Background music mood/genre/tempo."},
                    "sfx": {"type": "STRING", "description": "Sound effects for this shot."},
                    "characters": {"type": "ARRAY", "items": _CHARACTER_SCHEMA},
                    "dialogue": {"type": "STRING", "description": "Spoken line with emotion tags, empty if none."},
                    "lipSync": {"type": "STRING", "description": "Mouth-movement instruction, empty if no dialogue."},
                },
                "required": ["index", "visualPrompt", "technicalPrompt", "duration", "bgm", "sfx", "characters", "dialogue"],
            },
        },
    },
    "required": ["title", "visualPrompt", "technicalPrompt", "narration", "characters", "productionNote", "shots"],
}


@dataclass
class GenerationPayload:
    """Everything needed for one generation call."""
    system_instruction: str
    user_content: str
    target_shot_count: Optional[int]
    target_word_count: int
    total_seconds: float
    cut_seconds: float
    response_schema: Dict[str, Any] = field(default_factory=lambda: RESPONSE_SCHEMA)


class RequestBuilder:

    def __init__(self, fallback_word_count: Optional[int] = None):
        self.fallback_word_count = (
            fallback_word_count if fallback_word_count is not None
            else settings.FALLBACK_NARRATION_WORDS
        )

    def build(self, request: PromptRequest, language: Language) -> GenerationPayload:
        total_seconds = parse_duration(request.total_duration)
        cut_seconds = parse_duration(request.cut_duration)
        shot_count = target_shot_count(total_seconds, cut_seconds)
        word_count = target_narration_words(total_seconds, self.fallback_word_count)

        return GenerationPayload(
            system_instruction=self.system_instruction(language, shot_count, word_count),
            user_content=self.user_content(request, language, shot_count, word_count),
            target_shot_count=shot_count,
            target_word_count=word_count,
            total_seconds=total_seconds,
            cut_seconds=cut_seconds,
        )

    @staticmethod
    def system_instruction(language: Language, shot_count: Optional[int], word_count: int) -> str:
        target = language.display_name
        shot_rule = (
            f"You MUST return exactly {shot_count} items in 'shots'."
            if shot_count else
            "Choose a shot count that fits the total duration and cut duration."
        )
        return f"""
You are an expert AI prompt engineer and a simulated creative team (director,
cinematographer, art director, sound designer, editor) writing prompts for
text-to-video models such as Sora, Veo and Runway.
Return ONLY valid JSON. No text outside JSON.

--- LANGUAGE ---
• JSON KEYS stay exactly as in the schema, in English ("visualPrompt", "shots", "bgm", ...).
• Every content VALUE (title, prompts, narration, characters, dialogue, lipSync,
  bgm, sfx, productionNote) is written in {target}.
• In 'technicalPrompt' standard industry terms (e.g. "Unreal Engine 5", "8k", "Bokeh")
  may stay in English.

--- STRUCTURE ---
• SHOT COUNT (STRICT): {shot_rule}
• Number shots with 'index' starting at 1, in chronological order.
• Every shot defines visualPrompt, technicalPrompt, duration, characters,
  dialogue (with emotion tags, empty if silent), lipSync, bgm and sfx.
• 'narration' is a voiceover for the whole video with bracketed emotion/tone tags
  (e.g. [Mysterious], [Calm]) and about {word_count} words so it fits the duration.
• 'productionNote' contains directorVision, cinematography, artDirection,
  soundDesign and editingStyle.

--- CONTENT SAFETY ---
• Describe observable visual attributes (clothing, colors, lighting, posture, motion)
  instead of subjective or emotional labels about people.
• Do not depict or name real public figures; use fictional characters.
• No sexual content, graphic violence, self-harm, hate, or other disallowed content.
""".strip()

    @staticmethod
    def user_content(
        request: PromptRequest,
        language: Language,
        shot_count: Optional[int],
        word_count: int,
    ) -> str:
        motions = ", ".join(m.value for m in request.motion)
        shot_target = (
            f"{shot_count} (STRICTLY FOLLOW THIS COUNT)"
            if shot_count else
            "Auto-calculate based on total/cut duration"
        )
        return f"""
Create a video generation prompt for the following concept:

Topic/Subject: {request.topic}
Style: {request.style.value}
Camera Motion: {motions}
Aspect Ratio: {request.aspect_ratio.value}
Total Video Duration: {request.total_duration or "Unspecified"}
Average Cut Duration: {request.cut_duration or "Unspecified"}
Calculated Target Shot Count: {shot_target}
Target Narration Length: about {word_count} words
Additional Details: {request.details or "None"}

Language of output: {language.display_name}.
""".strip()
