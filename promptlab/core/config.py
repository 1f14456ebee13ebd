import os
from dotenv import load_dotenv

load_dotenv()

# --- DATABASE ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./promptlab.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"

# --- AUTH (tokens are issued by the session service, we only verify them) ---
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")

# --- API KEY ENCRYPTION ---
ENCRYPTION_SECRET = os.getenv("USER_API_KEY_ENCRYPTION_SECRET")

# --- SERVER ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- GENERATION ---
DEFAULT_GENERATION_MODEL = os.getenv("DEFAULT_GENERATION_MODEL", "gpt-4o-mini-2024-07-18")
GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.7"))
MESSAGE_DEFAULT_TEMPERATURE = float(os.getenv("MESSAGE_DEFAULT_TEMPERATURE", "0.7"))
ANTHROPIC_MAX_TOKENS = int(os.getenv("ANTHROPIC_MAX_TOKENS", "4096"))
