# -*- coding: utf-8 -*-
"""
brain.llm_client

OpenAI Chat 호출을 위한 공통 래퍼.

- 환경설정: core.config 에서 OPENAI_API_KEY / CHAT_MODEL / LLM_TIMEOUT_SECONDS 를 읽어 client 생성
- MODEL: 응원글 판별에 사용하는 기본 ChatGPT 모델 이름
- TEMP_CLASSIFIER: 판별용 temperature
- call_chat(messages, model, temperature, max_tokens): Chat API 래퍼

호출은 한 번만 시도한다. (max_retries=0, timeout 초과 시 바로 실패)
LLM_TIMEOUT_SECONDS 는 connect / write / read / pool 각 단계마다 따로 적용되는 한도다.
호출 전체에 걸리는 시간은 이보다 길어질 수 있다.
실패하면 예외 대신 빈 문자열을 돌려주고, 호출한 쪽에서 키워드 분석으로 넘어간다.
"""

from typing import List, Dict, Optional

import httpx
from openai import OpenAI

from core.config import (
    OPENAI_API_KEY,
    CHAT_MODEL,
    LLM_TIMEOUT_SECONDS,
    TEMP_CLASSIFIER,
    MAX_TOKENS,
)
from core.logging import logger


# -------------------- 환경 설정 --------------------
def _build_client(api_key: str) -> OpenAI:
    # 단계별 한도 (전체 한도 아님)
    return OpenAI(
        api_key=api_key,
        timeout=httpx.Timeout(LLM_TIMEOUT_SECONDS),
        max_retries=0,
    )


client: Optional[OpenAI] = None
if OPENAI_API_KEY:
    client = _build_client(OPENAI_API_KEY)
else:
    logger.warning("OPENAI_API_KEY가 없습니다. 키워드 기반 분석만 사용됩니다.")

MODEL = CHAT_MODEL


# -------------------- OpenAI Chat 호출 래퍼 --------------------
def call_chat(
    messages: List[Dict[str, str]],
    model: str = MODEL,
    temperature: float = TEMP_CLASSIFIER,
    max_tokens: int = MAX_TOKENS,
) -> str:
    """OpenAI Chat 호출 래퍼. 실패하면 ""."""
    if client is None:
        return ""

    try:
        resp = client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = resp.choices[0].message.content
        return (content or "").strip()
    except Exception as e:
        logger.warning(f"OpenAI API error: {e}")
        return ""
