#!/usr/bin/env python3
"""
config.py - Shared settings and logging for the professor assistant
"""

import os
from datetime import datetime
from dotenv import load_dotenv

load_dotenv()

CONFIG = {
    "openai_api_key": os.getenv("OPEN_AI_API_KEY"),
    "embedding_model": "text-embedding-3-small",
    "chat_model": "gpt-4o-mini",
    "vector_db_dir": os.getenv("VECTOR_DB_DIR", "data/vector_db"),
    "collection_name": "professor_reviews",
    "top_k": 3,
    "rate_limit": "10/minute",
    "api_url": os.getenv("CHAT_API_URL", "http://localhost:8000/api/chat"),
}


def log_message(message, level="INFO"):
    """Log messages with timestamp"""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {level}: {message}", flush=True)
