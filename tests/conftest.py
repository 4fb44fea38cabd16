"""Shared fixtures: the suite never reaches the real OpenAI API."""

import pytest

from core import config


@pytest.fixture(autouse=True)
def _no_remote_calls(monkeypatch):
    """LLM 호출은 기본적으로 '실패(빈 응답)'로 고정한다."""
    monkeypatch.setattr("brain.model_classifier.call_chat", lambda *a, **kw: "")
    monkeypatch.setattr(config, "USE_REMOTE_MODEL", True)
    yield


@pytest.fixture
def model_reply(monkeypatch):
    """LLM 이 돌려줄 원문 응답을 지정하는 헬퍼."""

    def _set(raw: str):
        calls = []

        def fake_call_chat(*args, **kwargs):
            calls.append(kwargs)
            return raw

        monkeypatch.setattr("brain.model_classifier.call_chat", fake_call_chat)
        return calls

    return _set
