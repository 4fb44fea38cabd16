# core/logging.py
# -*- coding: utf-8 -*-

import sys
import logging

# ------------------------------------------------
# 터미널 출력용 logger
# ------------------------------------------------
logger = logging.getLogger("encouragement_classifier")
logger.setLevel(logging.DEBUG)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
