# -*- coding: utf-8 -*-
"""
brain.utils_text

응원글 판별용 텍스트 공통 유틸 모듈.

역할
----
- compact(text): 소문자 변환 + 모든 공백 제거 (키워드 매칭용)
- unique_compact(keywords): 키워드 목록을 같은 방식으로 정규화하고 중복 제거
- matched_keywords(text, keywords): 텍스트에 들어 있는 키워드 목록

띄어쓰기가 제각각인 구어체 문장에서도 "할 수 있어" 와 "할수있어" 가
같은 키워드로 잡히도록, 비교는 항상 compact 된 문자열끼리 한다.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

_WHITESPACE_RE = re.compile(r"\s+")


def compact(text: str) -> str:
    """소문자로 바꾸고 공백(줄바꿈/탭 포함)을 전부 제거한다."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub("", text.lower())


def unique_compact(keywords: Iterable[str]) -> Tuple[str, ...]:
    """compact 후 중복을 제거한 키워드 튜플 (원래 순서 유지)."""
    seen = set()
    out: List[str] = []
    for kw in keywords:
        c = compact(kw)
        if not c or c in seen:
            continue
        seen.add(c)
        out.append(c)
    return tuple(out)


def matched_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """
    text 안에 부분 문자열로 들어 있는 키워드만 골라 반환.
    단어 경계는 보지 않는다. (짧은 키워드가 긴 단어 안에서도 잡힘)
    text, keywords 모두 이미 compact 되어 있다고 가정한다.
    """
    if not text:
        return []
    return [kw for kw in keywords if kw in text]
