# routers/health.py
from fastapi import APIRouter

from core import config

router = APIRouter()

@router.get("/", summary="헬스 체크", tags=["health"])
def root():
    # LLM 을 쓸 수 없는 상태면 모든 요청이 키워드 분석으로 처리된다.
    return {
        "message": "응원글 판별 FastAPI 동작 중",
        "model": config.CHAT_MODEL,
        "remote_enabled": bool(config.USE_REMOTE_MODEL and config.OPENAI_API_KEY),
    }
