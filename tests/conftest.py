# tests/conftest.py
import json
import os
import sys

import pytest

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

# Ensure a credential is configured so no test reaches a real key lookup
os.environ.setdefault("GEMINI_API_KEY", "test-key")


SAMPLE_PLAN = {
    "title": "The Water Cycle",
    "learning_objectives": [
        "Describe evaporation",
        "Explain condensation",
        "Identify forms of precipitation",
    ],
    "slides": [
        {"title": "Evaporation", "content": "- Sun heats water\n- Water becomes vapor"},
        {"title": "Condensation", "content": "* Vapor cools\n\n* Clouds form"},
    ],
    "quiz": [
        {
            "question": "What makes water evaporate?",
            "options": ["Heat", "Cold", "Wind", "Salt"],
            "answer": "Heat",
        }
    ],
    "homework": {
        "title": "Cycle Diary",
        "description": "Track the weather for a week.",
    },
}


def make_envelope(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def sample_plan_dict() -> dict:
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def envelope_for():
    return make_envelope


@pytest.fixture
def sample_envelope() -> dict:
    return make_envelope(json.dumps(SAMPLE_PLAN))
