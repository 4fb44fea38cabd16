# -*- coding: utf-8 -*-
"""
응원글 판별 엔진

LLM 판별 1회 시도 → 실패하면 같은 텍스트로 키워드 판별.
어느 쪽이든 결과는 하나만 만들어진다.

입력 검증
---------
- None, 빈 문자열, 공백(줄바꿈/탭 포함)만 있는 문자열은 EmptyTextError.
  "   " 도 판별하지 않고 거부하므로 /api/analyze 에서는 400 이 된다.
"""

from typing import Callable, Optional

from core import config
from core.logging import logger

from .classifier import classify_with_heuristic
from .model_classifier import classify_with_model
from .result import ClassificationResult, EmptyTextError

# text -> 결과 또는 None(실패)
RemoteClassifier = Callable[[str], Optional[ClassificationResult]]


def _try_remote(remote: RemoteClassifier, text: str) -> Optional[ClassificationResult]:
    try:
        return remote(text)
    except Exception as e:
        logger.warning(f"원격 판별 중 오류: {e}")
        return None


def classify_text(
    text: Optional[str],
    remote: Optional[RemoteClassifier] = None,
) -> ClassificationResult:
    """
    텍스트 하나를 받아 응원글 여부를 판별한다.

    - 빈 텍스트(공백만 있는 경우 포함)는 EmptyTextError
    - 그 외에는 항상 ClassificationResult 를 돌려준다.
    """
    if text is None or not text.strip():
        raise EmptyTextError()

    if remote is None:
        remote = classify_with_model

    result: Optional[ClassificationResult] = None
    if config.USE_REMOTE_MODEL:
        result = _try_remote(remote, text)
        if result is None:
            logger.info("LLM 판별 실패 → 키워드 기반 분석으로 대체")

    if result is None:
        result = classify_with_heuristic(text)

    logger.debug(
        f"판별 완료: method={result.method} "
        f"isEncouragement={result.is_encouragement} reason={result.reason}"
    )
    return result
