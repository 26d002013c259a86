import os

from dotenv import load_dotenv

# Load .env
load_dotenv()

API_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# ---- SERVER ----
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5055"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ---- DATASETS ----
DATA_PATH = os.getenv("GOSPELPATH_DATA_PATH", os.path.join(API_DIR, "data"))
POPULAR_CROSS_REFS_FILE = "cross-references-popular.json"
FULL_CROSS_REFS_FILE = "cross-references.json"

# ---- BOLLS.LIFE (text + lexicon provider) ----
BOLLS_BASE_URL = os.getenv("BOLLS_BASE_URL", "https://bolls.life")
BOLLS_TIMEOUT = float(os.getenv("BOLLS_TIMEOUT", "10"))
BOLLS_HEBREW_EDITION = os.getenv("BOLLS_HEBREW_EDITION", "OHB")
BOLLS_GREEK_EDITION = os.getenv("BOLLS_GREEK_EDITION", "OGNT")
BOLLS_DICTIONARY = os.getenv("BOLLS_DICTIONARY", "BDBT")

# Concurrent lexicon lookups per interlinear request
GLOSS_MAX_WORKERS = int(os.getenv("GLOSS_MAX_WORKERS", "8"))

# ---- LLM PROVIDERS ----
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_BASE_URL = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")

LLM_TIMEOUT = int(os.getenv("LLM_TIMEOUT", "120"))
