# -*- coding: utf-8 -*-
"""
brain 패키지

응원글 판별기의 핵심 로직 모음입니다.

외부(예: app_fastapi.py)에서는 보통 아래 함수만 직접 사용합니다.

- classify_text(text):
    텍스트 하나를 받아 LLM 판별을 시도하고,
    실패하면 키워드 기반 판별로 대체해 ClassificationResult 를 돌려줍니다.

세부 로직은 다음 모듈로 나뉘어 있습니다.

- utils_text           : 공백 제거 정규화, 키워드 매칭 유틸
- result               : ClassificationResult / EmptyTextError
- llm_client           : OpenAI Chat 호출 래퍼
- model_classifier     : LLM 프롬프트 + 응답 JSON 검증
- classifier           : 키워드/패턴 기반 대체 판별
- encouragement_engine : LLM → 키워드 대체 흐름
"""

from .encouragement_engine import classify_text
from .result import ClassificationResult, EmptyTextError

__all__ = ["classify_text", "ClassificationResult", "EmptyTextError"]
