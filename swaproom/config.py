"""Environment-driven settings for the swap room service."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


# Environment variable parsing
ENV = os.getenv("ENV")
ENV_IS_PROD = ENV == "prod"
COMMIT_HASH = os.getenv("COMMIT_HASH")
if not COMMIT_HASH and ENV_IS_PROD:
    raise ValueError("COMMIT_HASH is required for production environments")

APP_ADDR = os.getenv("HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database
DATABASE_URL = os.getenv("DATABASE_URL")
SQL_DEBUG = _env_bool("SQL_DEBUG", "false")

# Room codes
ROOM_CODE_LENGTH = 6
ROOM_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
ROOM_CODE_MAX_ATTEMPTS = 10

# Room capacity bounds
MIN_ROOM_CAPACITY = 2
MAX_ROOM_CAPACITY = 8

# Start gating applied by the HTTP surface, not by the registry
MIN_PARTICIPANTS_TO_START = int(os.getenv("MIN_PARTICIPANTS_TO_START", "2"))

# Swaps
SWAP_REQUIRE_MEMBERSHIP = _env_bool("SWAP_REQUIRE_MEMBERSHIP", "true")
SWAP_HISTORY_DEFAULT_LIMIT = int(os.getenv("SWAP_HISTORY_DEFAULT_LIMIT", "20"))
SWAP_HISTORY_MAX_LIMIT = int(os.getenv("SWAP_HISTORY_MAX_LIMIT", "100"))

# Chat log
MESSAGE_LIST_DEFAULT_LIMIT = 50
MESSAGE_LIST_MAX_LIMIT = int(os.getenv("MESSAGE_LIST_MAX_LIMIT", "200"))
