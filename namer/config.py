import os

from dotenv import load_dotenv

# Load environment variables (OPENAI_API_KEY, NAMER_*) from a local .env file if present.
load_dotenv()

# One multimodal model serves text, reference and image requests.
MODEL = os.getenv("NAMER_MODEL", "gpt-4.1-mini")

# Number of candidates requested per call.
DEFAULT_NAME_COUNT = int(os.getenv("NAMER_NAME_COUNT", "6"))

# Follow-up ("more like this") requests sample slightly hotter for variety.
TEMPERATURE = float(os.getenv("NAMER_TEMPERATURE", "0.8"))
RELATED_TEMPERATURE = float(os.getenv("NAMER_RELATED_TEMPERATURE", "0.85"))

# SDK-level transport retries. Zero keeps one attempt per call.
MAX_RETRIES = int(os.getenv("NAMER_MAX_RETRIES", "0"))

DEFAULT_TONE = os.getenv("NAMER_DEFAULT_TONE", "modern")
DEFAULT_IMAGE_MIME_TYPE = "image/png"

# Comma separated list; "*" allows any origin.
CORS_ORIGINS = [o.strip() for o in os.getenv("NAMER_CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("NAMER_LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("NAMER_LOG_JSON", "true").lower() == "true"
