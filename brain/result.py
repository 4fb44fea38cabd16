# -*- coding: utf-8 -*-
"""
brain.result

LLM 판별과 키워드 판별이 공통으로 돌려주는 결과 형식.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal

Method = Literal["model", "heuristic"]

METHOD_MODEL: Method = "model"
METHOD_HEURISTIC: Method = "heuristic"


class EmptyTextError(ValueError):
    """판별할 텍스트가 비어 있을 때."""

    def __init__(self, message: str = "텍스트가 필요합니다.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ClassificationResult:
    """응원글 판별 결과 (생성 후 변경 불가)."""

    is_encouragement: bool
    reason: str
    method: Method

    def __post_init__(self) -> None:
        if not self.reason or not self.reason.strip():
            raise ValueError("reason must not be empty")
        if self.method not in (METHOD_MODEL, METHOD_HEURISTIC):
            raise ValueError(f"unknown method: {self.method!r}")

    def to_dict(self) -> Dict[str, Any]:
        """프론트로 내려보내는 JSON 형태."""
        return {
            "isEncouragement": self.is_encouragement,
            "reason": self.reason,
            "method": self.method,
        }
