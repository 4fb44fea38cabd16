# -*- coding: utf-8 -*-
"""
main.py

응원글 판별기의 콘솔 데모 진입점입니다.

- 한 줄씩 텍스트를 입력받아 brain.classify_text 결과를 출력
- exit / quit / Ctrl+D 로 종료

👉 HTTP 로 쓰려면 app_fastapi.py 를 uvicorn 으로 띄우면 됩니다.
"""

import json

from brain import classify_text, EmptyTextError


def run_text_mode():
    """
    콘솔에서 텍스트를 입력받아
    판별 결과를 확인하는 모드입니다.
    """
    print("\n[응원글 판별 데모] (exit로 종료)")

    while True:
        try:
            text = input("\n텍스트 > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n종료합니다.")
            break

        if text.lower() in ("exit", "quit"):
            print("종료합니다.")
            break

        try:
            result = classify_text(text)
        except EmptyTextError as e:
            print("[입력 오류]", e)
            continue

        print("[판별]", "응원글" if result.is_encouragement else "응원글 아님")
        print("[이유]", result.reason)
        print("[방식]", result.method)
        print("FE:" + json.dumps(result.to_dict(), ensure_ascii=False))


def main():
    run_text_mode()


if __name__ == "__main__":
    main()
