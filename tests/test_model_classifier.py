"""Tests for the LLM adapter: prompt framing, reply validation, client failures."""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
import pytest

from brain import llm_client
from brain.model_classifier import (
    SYSTEM_PROMPT,
    build_messages,
    classify_with_model,
    parse_model_reply,
)
from brain.result import METHOD_MODEL


def test_happy_path_returns_model_result(model_reply):
    calls = model_reply(json.dumps({"isEncouragement": True, "reason": "격려 표현이 있음"}, ensure_ascii=False))

    result = classify_with_model("힘내세요")

    assert result is not None
    assert result.is_encouragement is True
    assert result.reason == "격려 표현이 있음"
    assert result.method == METHOD_MODEL

    sent = calls[0]["messages"]
    assert sent[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert sent[1] == {"role": "user", "content": "힘내세요"}


def test_empty_reply_is_failure(model_reply):
    model_reply("")
    assert classify_with_model("힘내세요") is None


def test_prompt_states_json_contract():
    assert '"isEncouragement"' in SYSTEM_PROMPT
    assert '"reason"' in SYSTEM_PROMPT
    assert build_messages("x")[1]["content"] == "x"


def test_code_fenced_json_is_accepted():
    raw = '```json\n{"isEncouragement": false, "reason": "단순 질문"}\n```'
    result = parse_model_reply(raw)

    assert result is not None
    assert result.is_encouragement is False
    assert result.reason == "단순 질문"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "응원글입니다!",
        "{not json",
        "[true, \"이유\"]",
        '{"isEncouragement": "true", "reason": "문자열 불리언"}',
        '{"isEncouragement": 1, "reason": "숫자"}',
        '{"isEncouragement": true}',
        '{"isEncouragement": true, "reason": ""}',
        '{"isEncouragement": true, "reason": 3}',
        '{"reason": "플래그 없음"}',
    ],
)
def test_malformed_replies_are_rejected(raw):
    assert parse_model_reply(raw) is None


def test_call_chat_without_client_returns_empty():
    with patch.object(llm_client, "client", None):
        assert llm_client.call_chat([{"role": "user", "content": "hi"}]) == ""


def test_call_chat_returns_stripped_content():
    fake = MagicMock()
    fake.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content='  {"a": 1}\n'))]
    )

    with patch.object(llm_client, "client", fake):
        out = llm_client.call_chat([{"role": "user", "content": "hi"}])

    assert out == '{"a": 1}'
    kwargs = fake.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == llm_client.MODEL
    assert kwargs["max_tokens"] == llm_client.MAX_TOKENS


def test_call_chat_swallows_timeout_without_retry():
    fake = MagicMock()
    fake.chat.completions.create.side_effect = TimeoutError("timed out")

    with patch.object(llm_client, "client", fake):
        assert llm_client.call_chat([{"role": "user", "content": "hi"}]) == ""

    assert fake.chat.completions.create.call_count == 1


def test_call_chat_handles_null_content():
    fake = MagicMock()
    fake.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
    )

    with patch.object(llm_client, "client", fake):
        assert llm_client.call_chat([{"role": "user", "content": "hi"}]) == ""


def test_client_uses_single_attempt_with_stage_timeout():
    built = llm_client._build_client("sk-test")

    assert built.max_retries == 0
    assert built.timeout == httpx.Timeout(llm_client.LLM_TIMEOUT_SECONDS)
