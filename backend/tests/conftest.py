"""Shared pytest fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from collab.main import create_app
from collab.models import Question
from collab.store import QuestionStore


@pytest.fixture
def questions():
    """Five questions, ids "1".."5", the last one untagged."""
    return [
        Question(
            id=str(i),
            title=f"Question {i}",
            content=f"Content of question {i}",
            tags=None if i == 5 else [f"tag{i}"],
        )
        for i in range(1, 6)
    ]


@pytest.fixture
def store(questions):
    return QuestionStore.from_questions(questions)


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def strict_client(store):
    """Client for an app that only accepts one origin."""
    return TestClient(create_app(store=store, allow_origins=["https://allowed.example"]))


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload to a temp file and return its path."""

    def _write(payload, name="questions.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
