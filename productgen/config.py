import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Gemini models
GEMINI_TEXT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image-preview")

# Generation constants
SCENE_COUNT = 4  # usage images per batch (initial run and "generate more")
SUPPORTED_MIME_TYPES = ("image/png", "image/jpeg", "image/webp")

# Runtime
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")
