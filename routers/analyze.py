# routers/analyze.py
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from brain import classify_text, EmptyTextError

router = APIRouter()


class AnalyzeRequest(BaseModel):
    """
    응원글 판별 요청 바디.
    - text: 판별할 문장 (비어 있으면 400)
    """
    text: Optional[str] = Field(
        default=None,
        description="응원글인지 판별할 텍스트",
        examples=["화이팅, 할 수 있어!"],
    )


class AnalyzeResponse(BaseModel):
    isEncouragement: bool = Field(..., description="응원글이면 true")
    reason: str = Field(..., description="판별 이유 (한국어)")
    method: str = Field(..., description='"model" (LLM) 또는 "heuristic" (키워드 기반)')


@router.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    summary="응원글 판별",
    tags=["analyze"],
)
def analyze(body: AnalyzeRequest):
    try:
        result = classify_text(body.text)
    except EmptyTextError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AnalyzeResponse(**result.to_dict())
