# app_fastapi.py
# -*- coding: utf-8 -*-

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# 🔹 환경 설정 / 로깅은 core 모듈에서 가져옵니다.
from core.config import CORS_ALLOW_ORIGINS
from core.logging import logger
from routers import analyze, health

# ============================================================
# FastAPI 앱 기본 세팅 (Swagger 설명 포함)
# ============================================================

app = FastAPI(
    title="응원글 판별 API",
    description="""
짧은 텍스트가 **응원글**(응원/격려/지지/위로)인지 판별하는 API입니다.

- 먼저 OpenAI 모델에 판별을 요청합니다.
- 호출 실패/시간 초과/응답 형식 오류 시에는
  키워드 기반 분석으로 대체해 항상 결과를 돌려줍니다.
- 응답의 `method` 로 어느 쪽이 판별했는지 알 수 있습니다 (`model` / `heuristic`).
""",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(health.router)
app.include_router(analyze.router)

logger.debug("registered routes: " + ", ".join(getattr(r, "path", "") for r in app.routes))


if __name__ == "__main__":
    uvicorn.run("app_fastapi:app", host="0.0.0.0", port=8000)
