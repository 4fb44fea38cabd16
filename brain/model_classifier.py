# -*- coding: utf-8 -*-
"""
brain.model_classifier

LLM 에게 '응원글인지'만 묻는 작은 에이전트 모듈입니다.

입력:
- text : 판별할 텍스트 (사용자 메시지로 그대로 전달)

출력 예:
{
  "isEncouragement": true,
  "reason": "힘내라는 격려 표현이 담겨 있음"
}

호출 실패, 빈 응답, 형식이 맞지 않는 JSON 은 모두 None 으로 돌려주고
판단은 호출한 쪽(encouragement_engine)에 맡긴다.
"""

from typing import Any, Optional
import json

from core.logging import logger

from .llm_client import call_chat, MODEL, TEMP_CLASSIFIER
from .result import ClassificationResult, METHOD_MODEL


SYSTEM_PROMPT = """
당신은 텍스트가 응원의 의미를 담고 있는지 판별하는 전문가입니다.

입력된 텍스트를 분석해서:
- 응원, 격려, 지지, 위로의 의미가 담겨있으면 true
- 그렇지 않으면 false로 답변해주세요.

응원글의 특징:
- 긍정적인 감정 전달 (화이팅, 파이팅, 힘내세요 등)
- 격려와 지지 (잘할 수 있어, 괜찮아, 수고했어 등)
- 위로와 공감 (힘들겠지만, 이해해, 함께해 등)
- 미래에 대한 희망적 메시지 (잘 될 거야, 해낼 수 있어 등)

욕설이나 비하 표현이 섞여 있으면 응원글이 아닙니다.

답변은 반드시 JSON 하나로만 해주세요. 다른 말은 절대 하지 마세요.
{"isEncouragement": true/false, "reason": "판별 이유를 한국어로"}
""".strip()


def _strip_code_fence(raw: str) -> str:
    """```json ... ``` 으로 감싼 응답이면 안쪽만 꺼낸다."""
    s = raw.strip()
    if s.startswith("```"):
        s = s.split("\n", 1)[-1] if "\n" in s else s[3:]
        if s.endswith("```"):
            s = s[:-3]
        s = s.strip()
    return s


def parse_model_reply(raw: str) -> Optional[ClassificationResult]:
    """LLM 응답 문자열을 결과로 변환. 형식이 다르면 None."""
    if not raw or not raw.strip():
        return None

    try:
        data: Any = json.loads(_strip_code_fence(raw))
    except json.JSONDecodeError:
        logger.warning(f"LLM 응답 JSON 파싱 실패: {raw[:200]!r}")
        return None

    if not isinstance(data, dict):
        return None

    flag = data.get("isEncouragement")
    reason = data.get("reason")

    # "true" 같은 문자열은 받지 않는다.
    if not isinstance(flag, bool):
        return None
    if not isinstance(reason, str) or not reason.strip():
        return None

    return ClassificationResult(
        is_encouragement=flag,
        reason=reason.strip(),
        method=METHOD_MODEL,
    )


def build_messages(text: str) -> list:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": text},
    ]


def classify_with_model(text: str) -> Optional[ClassificationResult]:
    """
    LLM 으로 응원글 여부를 판별.

    성공하면 method="model" 결과, 실패하면 None.
    """
    resp = call_chat(
        model=MODEL,
        messages=build_messages(text),
        temperature=TEMP_CLASSIFIER,
    )
    if not resp:
        return None

    return parse_model_reply(resp)
