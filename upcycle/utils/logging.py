# =============================================
# File: upcycle/utils/logging.py
# Purpose: Loguru file sink for service logs
# =============================================

import os

from loguru import logger

LOG_FILE = os.getenv("LOG_FILE", "logs/upcycle.log")

if LOG_FILE:
    logger.add(LOG_FILE, rotation="10 MB", level=os.getenv("LOG_LEVEL", "INFO").upper())
