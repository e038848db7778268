import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(__file__)
load_dotenv(os.path.join(BASE_DIR, ".env"))

# Only the CLI falls back to this key; HTTP requests always carry their own.
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")
LEXICA_MODEL = os.getenv("LEXICA_MODEL", "gemini-2.0-flash")
LOG_LEVEL = os.getenv("LEXICA_LOG_LEVEL", "INFO").upper()

STORAGE_PATH = os.path.expanduser(
    os.getenv("LEXICA_STORAGE_PATH", os.path.join("~", ".config", "lexica", "storage.json"))
)
API_KEY_STORAGE_KEY = "wordcraftApiKeyV1"

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")]

TONES = ("Conversational", "Formal", "Poetic", "Technical", "Humorous", "Concise")
DEFAULT_TONE = "Conversational"

WORD_MIN_LENGTH = 1
WORD_MAX_LENGTH = 50
CONTEXT_MIN_LENGTH = 5
CONTEXT_MAX_LENGTH = 500
API_KEY_MIN_LENGTH = 10
API_KEY_MAX_LENGTH = 100
