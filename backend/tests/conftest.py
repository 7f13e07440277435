from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[2]
for _path in (_ROOT / "src", _ROOT / "backend" / "lambda_src"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))


_BLUEPRINT_PAYLOAD = {
    "title": "3 AI automations that buy back your week",
    "hook": "You are wasting 10 hours a week on work a bot can do.",
    "summary": "Three fast automations for solo creators, each shown end to end.",
    "script": [
        {
            "timestamp": "0:00-0:03",
            "narration": "You are wasting 10 hours a week.",
            "onScreen": "Creator slumped over a laptop, timer ticking",
            "emphasis": "punchy",
        },
        {
            "timestamp": "0:03-0:15",
            "narration": "Automation one: auto-clip your long videos.",
            "onScreen": "Screen recording of clips being generated",
            "emphasis": "fast cuts",
        },
        {
            "timestamp": "0:15-0:27",
            "narration": "Automation two: draft captions from transcripts.",
            "onScreen": "Transcript morphing into captions",
            "emphasis": "steady build",
        },
        {
            "timestamp": "0:27-0:42",
            "narration": "Automation three: schedule everything in one click.",
            "onScreen": "Calendar filling up",
            "emphasis": "energetic",
        },
        {
            "timestamp": "0:42-0:55",
            "narration": "Grab the free workflow template in my bio.",
            "onScreen": "Template preview with arrow to bio",
            "emphasis": "warm close",
        },
    ],
    "shotPlan": [
        {"label": "Cold open", "description": "Tight face cam, push in", "duration": "3s", "notes": "Handheld"},
        {"label": "Demo 1", "description": "Screen capture with zoom", "duration": "12s", "notes": ""},
        {"label": "Demo 2", "description": "Split screen transcript", "duration": "12s", "notes": "Add captions"},
        {"label": "Demo 3", "description": "Calendar overlay", "duration": "15s", "notes": ""},
        {"label": "CTA", "description": "Medium shot pointing up", "duration": "13s", "notes": "Bright key light"},
    ],
    "callToAction": "Download the free workflow template linked in bio",
    "caption": "Stop doing robot work. Three automations inside.",
    "hashtags": ["#ai", "automation", "#creators", "productivity", "youtubeshorts", "#workflow"],
    "broll": [
        "Timer overlay",
        "Clip generation timelapse",
        "Caption typing animation",
        "Calendar fill animation",
        "Template mockup",
    ],
    "soundDesign": ["Driving synth bed at 120 BPM", "Whoosh on each cut", "Duck music under voice"],
    "tips": ["Cut every 2 seconds", "Use kinetic captions", "Deliver the hook in one breath"],
    "productionNotes": "Film vertically in one take per demo.",
}

VALID_BRIEF = {
    "topic": "3 AI automations that save creators time",
    "audience": "solo creators on TikTok",
    "goal": "grow the newsletter",
    "duration": "55 seconds",
    "tone": "high-energy",
    "callToAction": "Download the template",
    "language": "English",
}


@pytest.fixture
def blueprint_payload() -> dict:
    return copy.deepcopy(_BLUEPRINT_PAYLOAD)


@pytest.fixture
def brief_payload() -> dict:
    return dict(VALID_BRIEF)


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch):
    # setenv first so teardown restores the original value
    for name in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)

    from shorts_architect import ssm

    monkeypatch.setattr(ssm, "_parameter_cache", {})
    monkeypatch.setattr(ssm, "_ssm_client", None)
