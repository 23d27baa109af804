import asyncio
import json

import pytest

from veospark.core.config import Settings
from veospark.schemas import CameraMotion, Language, VideoStyle, toggle_motion, combined_prompt
from veospark.services.coercion import coerce_result
from veospark.services.history_store import HistoryStore
from veospark.services.llm.base import LLMCallError
from veospark.services.pipeline import GenerationError, PromptStudio, append_suggestion

from conftest import FakeGenerator, reply_text, sample_reply


def _studio(reply, **overrides):
    settings = Settings(**{"FALLBACK_NARRATION_WORDS": 40, **overrides})
    return PromptStudio(FakeGenerator(reply), settings)


def test_generate_two_shots_for_ten_seconds(prompt_request):
    studio = _studio(reply_text(sample_reply(shot_count=2)))
    result = asyncio.run(studio.build_and_submit(prompt_request, Language.en))

    assert len(result.shots) == 2
    assert all(s.duration == "5s" for s in result.shots)
    call = studio.generator.calls[0]
    assert "exactly 2 items" in call["system"]
    assert call["schema"] is not None
    assert call["json"] is True


def test_generate_from_fenced_reply_with_prose(prompt_request):
    text = "Here you go:\n```json\n" + reply_text(sample_reply(shot_count=2)) + "\n```"
    result = asyncio.run(_studio(text).build_and_submit(prompt_request, Language.en))

    assert result.title == "Rain Cat"
    assert result.production_note.sound_design == "Rain ambience"
    assert [s.index for s in result.shots] == [1, 2]


def test_truncated_reply_is_a_parse_failure(prompt_request, db_session):
    store = HistoryStore(db_session)
    existing = coerce_result(sample_reply(shot_count=1), prompt_request)
    store.save([existing])

    truncated = reply_text(sample_reply(shot_count=2))[:-40]
    with pytest.raises(GenerationError) as exc:
        asyncio.run(_studio(truncated).build_and_submit(prompt_request, Language.en))

    assert exc.value.category == "parse"
    assert exc.value.raw_text == truncated
    assert store.load() == [existing]


def test_service_failure_is_reported(prompt_request):
    with pytest.raises(GenerationError) as exc:
        asyncio.run(_studio(LLMCallError("blocked by safety")).build_and_submit(prompt_request, Language.ko))
    assert exc.value.category == "service"


def test_unexpected_call_failure_is_a_service_error(prompt_request):
    with pytest.raises(GenerationError) as exc:
        asyncio.run(_studio(RuntimeError("credentials missing")).build_and_submit(prompt_request, Language.ko))
    assert exc.value.category == "service"
    assert "credentials missing" in str(exc.value)


def test_suggest_details():
    studio = _studio("  Chiaroscuro lighting with rain-slick neon reflections.\n")
    outcome = asyncio.run(studio.suggest_details("a cat in rain", VideoStyle.NOIR, Language.en))

    assert outcome.value == "Chiaroscuro lighting with rain-slick neon reflections."
    assert "Output language: English" in studio.generator.calls[0]["content"]


def test_suggest_details_failure_is_empty():
    outcome = asyncio.run(_studio(LLMCallError("down")).suggest_details("x", VideoStyle.ANIME, Language.ko))
    assert outcome.value == ""
    assert outcome.degraded


def test_suggest_details_blank_topic_skips_call():
    studio = _studio("unused")
    outcome = asyncio.run(studio.suggest_details(" ", VideoStyle.ANIME, Language.ko))
    assert outcome.value == ""
    assert studio.generator.calls == []


def test_append_suggestion():
    assert append_suggestion("moody", "neon glow") == "moody, neon glow"
    assert append_suggestion("  ", "neon glow") == "neon glow"
    assert append_suggestion(None, "neon glow") == "neon glow"
    assert append_suggestion("moody", "") == "moody"


def test_cinematic_design_keeps_known_motions():
    reply = json.dumps({
        "details": "Low-key light, teal shadows.",
        "motion": ["slow motion", "Crane / Jib Shot", "Barrel Roll Cam", 7, "Slow Motion"],
    })
    outcome = asyncio.run(_studio(reply).generate_cinematic_design("x", VideoStyle.NOIR, Language.en))

    assert outcome.value.details == "Low-key light, teal shadows."
    assert outcome.value.motion == [CameraMotion.SLOW_MOTION, CameraMotion.CRANE]


def test_cinematic_design_failure_is_empty():
    outcome = asyncio.run(_studio("nope").generate_cinematic_design("x", VideoStyle.NOIR, Language.en))
    assert outcome.degraded
    assert outcome.value.details == ""
    assert outcome.value.motion == []


def _translator(fail_marker=None):
    def respond(system, content):
        if fail_marker and fail_marker in content:
            raise LLMCallError("translation refused")
        if "JSON" in system:
            data = json.loads(content)
            data["title"] = "[ko] " + data["title"]
            return json.dumps(data, ensure_ascii=False)
        return "[ko] " + content
    return respond


def test_switch_language_with_one_failing_result(prompt_request):
    first = coerce_result(sample_reply(shot_count=2, title="Doomed"), prompt_request)
    second = coerce_result(sample_reply(shot_count=2, title="Fine"), prompt_request)
    studio = _studio(_translator(fail_marker="Doomed"))

    outcome = asyncio.run(studio.switch_language("a cat", "moody", [first, second], Language.ko))
    switched = outcome.value

    assert outcome.degraded
    assert switched.language == Language.ko
    assert switched.results[0] == first
    assert switched.results[1].title == "[ko] Fine"
    assert switched.results[1].id == second.id
    assert switched.topic == "[ko] a cat"
    assert switched.details == "[ko] moody"


def test_switch_language_only_translates_recent(prompt_request):
    results = [coerce_result(sample_reply(shot_count=1, title=f"R{i}"), prompt_request) for i in range(3)]
    studio = _studio(_translator(), TRANSLATE_RECENT_LIMIT=2)

    outcome = asyncio.run(studio.switch_language("", "", results, Language.ko))

    assert not outcome.degraded
    assert [r.title for r in outcome.value.results] == ["[ko] R0", "[ko] R1", "R2"]
    assert outcome.value.results[2] is results[2]
    assert outcome.value.topic == ""


def test_migrate_history_is_exposed():
    assert PromptStudio.migrate_history([{"no": "id"}]) == []


def test_toggle_motion():
    selected = [CameraMotion.DRONE_FLYOVER]
    assert toggle_motion(selected, CameraMotion.DRONE_FLYOVER) == [CameraMotion.DRONE_FLYOVER]
    added = toggle_motion(selected, CameraMotion.PAN)
    assert added == [CameraMotion.DRONE_FLYOVER, CameraMotion.PAN]
    assert toggle_motion(added, CameraMotion.DRONE_FLYOVER) == [CameraMotion.PAN]


def test_combined_prompt(prompt_request):
    result = coerce_result(sample_reply(shot_count=1), prompt_request)
    text = combined_prompt(result)
    assert text.startswith(result.visual_prompt)
    assert "--style Film Noir --ar 16:9 --motion Drone Flyover, Slow Motion." in text
    assert text.endswith(f"Technical details: {result.technical_prompt}")
