# brain/classifier.py
# -*- coding: utf-8 -*-
"""
키워드 기반 응원글 판별 모듈 (LLM 대체용).

역할
----
- classify_with_heuristic(text):
    LLM 호출이 실패했을 때 키워드/패턴 신호만으로 응원글 여부를 결정.
- collect_signals(text):
    판별에 쓰이는 신호(응원 키워드 수, 부정 키워드 수, 타인 응원, 미래 희망)를 계산.

판별 순서
--------
0) 욕설/비하 표현이 하나라도 있으면 무조건 응원 아님 (다른 신호 무시)
1) 응원 키워드가 1개 이상               => 응원
2) 타인 언급 + 미래 희망 표현           => 응원 (다른 사람을 위한 응원)
3) 미래 희망 표현 + 부정 키워드 1개 이하 => 응원
4) 부정 키워드가 응원 키워드보다 많고 3개 이상 => 응원 아님 (부정 우세)
5) 그 외                                => 응원 아님

주의
----
- 매칭은 단어 경계를 보지 않는 부분 문자열 비교다.
  "좋아" 는 "안좋아" 안에서도 잡힌다.
- 같은 키워드가 여러 번 나와도 1개로 센다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from .result import ClassificationResult, METHOD_HEURISTIC
from .utils_text import compact, unique_compact, matched_keywords

# ------------------------------------------------------------
# 1. 절대 부정 (욕설/비하/적대 표현)
# ------------------------------------------------------------

ABSOLUTE_NEGATIVE_KEYWORDS = unique_compact([
    "바보",
    "멍청",
    "병신",
    "븅신",
    "등신",
    "찐따",
    "찌질",
    "한심",
    "꺼져",
    "닥쳐",
    "죽어버려",
    "죽여버",
    "쓰레기같",
    "쓰레기야",
    "재수없",
    "역겨",
    "혐오스",
    "미친놈",
    "미친년",
    "개새",
    "씨발",
    "존나",
    "꼴보기싫",
    "너따위",
])

# ------------------------------------------------------------
# 2. 맥락 부정 (혼자서는 판별을 뒤집지 않는 가벼운 부정어)
# ------------------------------------------------------------

CONTEXTUAL_NEGATIVE_KEYWORDS = unique_compact([
    "싫어",
    "짜증",
    "화나",
    "스트레스",
    "우울",
    "절망",
    "포기",
    "실패",
    "못해",
    "안돼",
    "어려워",
    "힘들",
    "피곤",
    "지쳐",
    "지치",
    "망했",
    "망해",
    "슬퍼",
    "슬프",
    "외로",
    "불안",
    "괴로",
])

# ------------------------------------------------------------
# 3. 응원 키워드 (역할별로 나눠 두지만 판별에는 합계만 사용)
# ------------------------------------------------------------

# 직접적인 응원/격려
DIRECT_ENCOURAGEMENT = [
    "화이팅",
    "파이팅",
    "힘내",
    "힘을 내",
    "응원",
    "포기하지 마",
    "포기하지 말",
    "기운 내",
    "아자아자",
    "가보자",
    "최선",
    "노력",
    "열심히",
]

# 능력에 대한 믿음
BELIEF_IN_ABILITY = [
    "할 수 있어",
    "할 수 있다",
    "잘할",
    "해낼",
    "믿어",
    "믿는다",
    "너라면",
    "충분해",
]

# 긍정적인 평가
POSITIVE_EVALUATION = [
    "잘했어",
    "잘하고 있",
    "멋져",
    "멋있",
    "최고",
    "대단해",
    "대단하",
    "훌륭해",
    "자랑스러",
    "든든해",
    "좋아",
]

# 위로/공감
COMFORT_EMPATHY = [
    "수고했",
    "고생했",
    "괜찮아",
    "괜찮을",
    "토닥",
    "위로",
    "이해해",
    "곁에 있",
    "함께",
    "지지해",
    "사랑해",
    "버텨",
    "견뎌",
    "극복",
]

# 미래에 대한 희망
FUTURE_HOPE = [
    "잘될",
    "희망",
    "꿈",
    "이룰",
    "목표",
    "밝은 미래",
]

# 다른 사람의 안녕을 비는 표현
WELL_WISHING = [
    "행복하길",
    "행복하세요",
    "건강하세요",
    "건강하길",
    "잘되길",
    "잘되기를",
    "평안",
    "축복",
]

ENCOURAGEMENT_KEYWORDS = unique_compact(
    DIRECT_ENCOURAGEMENT
    + BELIEF_IN_ABILITY
    + POSITIVE_EVALUATION
    + COMFORT_EMPATHY
    + FUTURE_HOPE
    + WELL_WISHING
)

# ------------------------------------------------------------
# 4. 패턴 (compact 된 문자열 기준)
# ------------------------------------------------------------

# 다른 사람들 + 모두/전부 계열
OTHERS_SUPPORT_PATTERN = re.compile(
    r"(다른사람|다른분|남들|모든사람|모든분|모두|다들|여러분|우리모두)"
)

# 변화/성공/희망 계열
FUTURE_HOPE_PATTERN = re.compile(
    r"(바뀌|바뀔|바꿀|변하|변할|변화|나아지|나아질|좋아지|좋아질|잘풀|풀릴"
    r"|잘되|잘될|성공|이루|이룰|이뤄|해내|해낼|희망|꿈|기대|언젠가)"
)


@dataclass(frozen=True)
class HeuristicSignals:
    """키워드 판별에 쓰이는 신호 묶음."""

    absolute_negatives: Tuple[str, ...]
    encouragements: Tuple[str, ...]
    contextual_negatives: Tuple[str, ...]
    has_others_support: bool
    has_future_hope: bool

    @property
    def encouragement_count(self) -> int:
        return len(self.encouragements)

    @property
    def contextual_negative_count(self) -> int:
        return len(self.contextual_negatives)


def collect_signals(text: str) -> HeuristicSignals:
    """정규화된 텍스트에서 판별 신호를 계산."""
    norm = compact(text)
    return HeuristicSignals(
        absolute_negatives=tuple(matched_keywords(norm, ABSOLUTE_NEGATIVE_KEYWORDS)),
        encouragements=tuple(matched_keywords(norm, ENCOURAGEMENT_KEYWORDS)),
        contextual_negatives=tuple(matched_keywords(norm, CONTEXTUAL_NEGATIVE_KEYWORDS)),
        has_others_support=bool(OTHERS_SUPPORT_PATTERN.search(norm)),
        has_future_hope=bool(FUTURE_HOPE_PATTERN.search(norm)),
    )


def _result(is_encouragement: bool, reason: str) -> ClassificationResult:
    return ClassificationResult(
        is_encouragement=is_encouragement,
        reason=reason,
        method=METHOD_HEURISTIC,
    )


# ------------------------------------------------------------
# 5. 메인 판별 함수
# ------------------------------------------------------------

def classify_with_heuristic(text: str) -> ClassificationResult:
    """키워드/패턴 신호만으로 응원글 여부를 결정한다.

    어떤 문자열이 들어와도 반드시 하나의 결과를 돌려준다.
    """
    signals = collect_signals(text)

    # 0) 욕설/비하 표현은 다른 신호와 관계없이 거부
    if signals.absolute_negatives:
        return _result(
            False,
            "욕설이나 비하 등 공격적인 표현이 포함되어 응원글로 볼 수 없음 "
            f"({', '.join(signals.absolute_negatives)})",
        )

    enc = signals.encouragement_count
    neg = signals.contextual_negative_count

    # 1) 응원 키워드
    if enc > 0:
        return _result(
            True,
            f"응원 관련 키워드 {enc}개 발견 ({', '.join(signals.encouragements)})",
        )

    # 2) 다른 사람들의 앞날을 바라는 응원
    if signals.has_others_support and signals.has_future_hope:
        return _result(True, "다른 사람들의 앞날이 잘 되기를 바라는 헌신적인 응원 메시지")

    # 3) 부정 표현이 적은 희망적인 메시지
    if signals.has_future_hope and neg <= 1:
        return _result(True, "미래에 대한 희망을 담은 메시지")

    # 4) 부정 표현 우세
    if neg > enc and neg > 2:
        return _result(False, f"부정적인 표현이 우세함 (응원: {enc}개, 부정: {neg}개)")

    # 5) 신호 없음
    return _result(False, f"응원 관련 표현을 찾지 못함 (응원: {enc}개, 부정: {neg}개)")
