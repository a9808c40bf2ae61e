# backend/collab/config.py
import os
from pathlib import Path
from typing import List

# === 預設資料 ================================================================
BUNDLED_QUESTIONS_FILE = Path(__file__).resolve().parent / "data" / "questions.json"

# === 環境變數（可覆蓋） ======================================================
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
QUESTIONS_FILE = Path(os.getenv("QUESTIONS_FILE") or BUNDLED_QUESTIONS_FILE)

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3030"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# === CORS ====================================================================
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_ALLOW_HEADERS = ["content-type"]


def parse_origins(raw: str) -> List[str]:
    """'*' or 'https://a.com, https://b.com' → list for CORSMiddleware."""
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


CORS_ALLOW_ORIGINS = parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
