# veospark/services/pipeline.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from veospark.core.config import Settings, settings as default_settings
from veospark.schemas import (
    CameraMotion,
    CinematicDesign,
    GeneratedPrompt,
    Language,
    PromptRequest,
    VideoStyle,
)
from veospark.services.coercion import as_text, coerce_result
from veospark.services.history_migration import migrate_history
from veospark.services.json_extraction import JSONExtractionError, extract_json_object
from veospark.services.llm.base import BaseTextGenerator
from veospark.services.outcome import Outcome
from veospark.services.request_builder import RequestBuilder
from veospark.services.translation import translate_prompt_result, translate_text


class GenerationError(RuntimeError):
    """The primary generation call produced no result."""

    def __init__(self, message: str, category: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.category = category  # "parse" | "service"
        self.raw_text = raw_text


@dataclass
class LanguageSwitch:
    topic: str
    details: str
    results: List[GeneratedPrompt]
    language: Language


def append_suggestion(existing: Optional[str], suggestion: str) -> str:
    current = (existing or "").strip()
    if not suggestion:
        return current
    return f"{current}, {suggestion}" if current else suggestion


_MOTIONS_BY_VALUE = {m.value.lower(): m for m in CameraMotion}


def _known_motions(value: Any) -> List[CameraMotion]:
    if not isinstance(value, list):
        return []
    picked: List[CameraMotion] = []
    for item in value:
        motion = _MOTIONS_BY_VALUE.get(as_text(item).strip().lower())
        if motion and motion not in picked:
            picked.append(motion)
    return picked


class PromptStudio:
    """
    Generation & normalization pipeline between the app state and the LLM.

    State (history, language) is passed in and returned, never held here.
    """

    def __init__(self, generator: BaseTextGenerator, settings: Settings = default_settings):
        self.generator = generator
        self.settings = settings
        self.builder = RequestBuilder(settings.FALLBACK_NARRATION_WORDS)

    async def build_and_submit(self, request: PromptRequest, language: Language) -> GeneratedPrompt:
        payload = self.builder.build(request, language)
        print(
            f"[Generate] topic={request.topic[:40]!r} language={language.value} "
            f"target_shots={payload.target_shot_count or 'auto'} words~{payload.target_word_count}"
        )

        try:
            text = await self.generator.generate(
                payload.system_instruction,
                payload.user_content,
                response_schema=payload.response_schema,
                json_output=True,
            )
        except Exception as e:
            # Any failure of the call itself (auth, transport, config) is a service failure
            print(f"[Generate ERROR] Service call failed: {type(e).__name__}: {e}")
            raise GenerationError(str(e), category="service") from e

        try:
            data = extract_json_object(text)
        except JSONExtractionError as e:
            print(f"[Generate ERROR] Unparseable response ({len(text)} chars)")
            raise GenerationError(str(e), category="parse", raw_text=e.raw_text) from e

        result = coerce_result(data, request)
        if payload.target_shot_count and len(result.shots) != payload.target_shot_count:
            print(
                f"[Generate] Shot count mismatch: got {len(result.shots)}, "
                f"asked for {payload.target_shot_count}"
            )
        return result

    async def suggest_details(self, topic: str, style: VideoStyle, language: Language) -> Outcome[str]:
        if not topic or not topic.strip():
            return Outcome.ok("")

        prompt = f"""
Role: A creative synergy of world-class film directors, art directors and music directors.

Task: Suggest 1 concise, artistic and impactful sentence describing specific lighting,
color grading, atmosphere, or rhythmic visual texture that would elevate the video topic.

Context:
- Topic: {topic}
- Style: {style.value}

Instructions:
1. Draw on recognizable cinematic techniques (e.g. chiaroscuro lighting, neon-noir reflections,
   pastel symmetrical composition, syncopated visual rhythm).
2. Describe observable visual qualities; do not reference real people.
3. Output language: {language.display_name}.
4. Return ONLY the suggestion text.
""".strip()

        try:
            text = await self.generator.generate("", prompt)
        except Exception as e:
            print(f"[Suggest] Skipping suggestion: {e}")
            return Outcome.fallback("", e)
        return Outcome.ok((text or "").strip())

    async def generate_cinematic_design(
        self, topic: str, style: VideoStyle, language: Language
    ) -> Outcome[CinematicDesign]:
        if not topic or not topic.strip():
            return Outcome.ok(CinematicDesign())

        vocabulary = ", ".join(f'"{m.value}"' for m in CameraMotion)
        prompt = f"""
Act as a film director planning the visual approach for a short video.

Topic: {topic}
Style: {style.value}

Return ONLY a JSON object with:
- "details": one paragraph (in {language.display_name}) on lighting, color grading,
  atmosphere and pacing, describing observable visual qualities only.
- "motion": 2 to 4 camera setups chosen ONLY from this list (exact spelling): {vocabulary}
""".strip()

        try:
            text = await self.generator.generate("", prompt, json_output=True)
            data = extract_json_object(text)
        except Exception as e:
            print(f"[Design] Auto design failed: {e}")
            return Outcome.fallback(CinematicDesign(), e)

        return Outcome.ok(
            CinematicDesign(
                details=as_text(data.get("details")).strip(),
                motion=_known_motions(data.get("motion")),
            )
        )

    async def switch_language(
        self,
        topic: str,
        details: str,
        results: List[GeneratedPrompt],
        target: Language,
    ) -> Outcome[LanguageSwitch]:
        """
        Translate form fields and recent results concurrently.

        Each piece falls back to its original on failure; the target
        language is returned either way.
        """
        limit = max(0, self.settings.TRANSLATE_RECENT_LIMIT)
        recent, older = results[:limit], results[limit:]

        outcomes = await asyncio.gather(
            translate_text(self.generator, topic, target),
            translate_text(self.generator, details, target),
            *(translate_prompt_result(self.generator, r, target) for r in recent),
        )
        topic_out, details_out, *result_outs = outcomes

        switched = LanguageSwitch(
            topic=topic_out.value,
            details=details_out.value,
            results=[o.value for o in result_outs] + list(older),
            language=target,
        )
        failures = [o.error for o in outcomes if o.degraded]
        if failures:
            print(f"[Translate] {len(failures)} of {len(outcomes)} pieces kept in original language")
            return Outcome(value=switched, degraded=True, error="; ".join(failures))
        return Outcome.ok(switched)

    @staticmethod
    def migrate_history(raw_records: Iterable[Any]) -> List[GeneratedPrompt]:
        return migrate_history(raw_records)
