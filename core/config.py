# core/config.py
# -*- coding: utf-8 -*-

import os

from dotenv import load_dotenv

# .env 로드 (가장 먼저 실행)
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# --------------------------------
# OpenAI (응원글 판별용 LLM)
# --------------------------------

# 없으면 원격 판별은 항상 실패로 처리되고 키워드 분석으로 넘어간다.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")

# 원격 호출 1회에 허용하는 최대 시간(초). 재시도는 하지 않는다.
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "5.0"))

TEMP_CLASSIFIER = 0.3
MAX_TOKENS = 200

# False 이면 LLM 을 건너뛰고 바로 키워드 기반 분석만 사용
USE_REMOTE_MODEL = _env_bool("ENCOURAGEMENT_USE_MODEL", True)

# --------------------------------
# HTTP / CORS
# --------------------------------
CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]
