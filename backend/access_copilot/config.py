import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
TEXT_MODEL = os.getenv("TEXT_MODEL", "gpt-4o-mini")
LLM_TEMPERATURE = 0.2
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "300"))

PORT = int(os.getenv("PORT", "4000"))
STATIC_DIR = os.getenv("STATIC_DIR", "public")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_BODY_BYTES = 2 * 1024 * 1024
