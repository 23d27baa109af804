import os

# Point the app at a throwaway database before veospark.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import json
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from veospark import models  # noqa: F401  (registers tables)
from veospark.db.base import Base
from veospark.schemas import CameraMotion, PromptRequest, VideoAspectRatio, VideoStyle
from veospark.services.llm.base import BaseTextGenerator

Reply = Union[str, BaseException, Callable[[str, str], str]]


class FakeGenerator(BaseTextGenerator):
    """Scripted stand-in for the text-generation service."""

    def __init__(self, reply: Reply = ""):
        self.reply = reply
        self.calls: List[Dict[str, Any]] = []

    async def generate(
        self,
        system_instruction: str,
        content: str,
        *,
        response_schema: Optional[Dict[str, Any]] = None,
        json_output: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        self.calls.append({
            "system": system_instruction,
            "content": content,
            "schema": response_schema,
            "json": json_output,
        })
        reply = self.reply
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return reply(system_instruction, content)
        return reply


def sample_reply(shot_count: int = 2, **overrides) -> Dict[str, Any]:
    data = {
        "title": "Rain Cat",
        "visualPrompt": "A grey cat shelters under a neon sign while rain falls.",
        "technicalPrompt": "35mm, shallow depth of field, volumetric light",
        "negativePrompt": "blur, distortion",
        "narration": "[Calm] The city sleeps. [Curious] One cat does not.",
        "characters": [{"name": "Cat", "description": "grey short-haired cat"}],
        "productionNote": {
            "directorVision": "Quiet noir",
            "cinematography": "Low key, teal and orange",
            "artDirection": "Wet asphalt, neon",
            "soundDesign": "Rain ambience",
            "editingStyle": "Slow dissolves",
        },
        "shots": [
            {
                "index": i + 1,
                "visualPrompt": f"Shot {i + 1} visual",
                "technicalPrompt": f"Shot {i + 1} lens",
                "duration": "3s",
                "bgm": "Soft piano",
                "sfx": "Rain",
                "characters": [{"name": "Cat", "description": "wet fur"}],
                "dialogue": "",
                "lipSync": "",
            }
            for i in range(shot_count)
        ],
    }
    data.update(overrides)
    return data


def reply_text(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False)


@pytest.fixture
def prompt_request() -> PromptRequest:
    return PromptRequest(
        topic="a cat in rain",
        style=VideoStyle.NOIR,
        aspect_ratio=VideoAspectRatio.WIDE_16_9,
        motion=[CameraMotion.DRONE_FLYOVER, CameraMotion.SLOW_MOTION],
        total_duration="10s",
        cut_duration="5s",
        details="moody",
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
