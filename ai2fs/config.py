import codecs
import os
from dotenv import load_dotenv

# Load .env (gracefully handle missing/unreadable .env)
try:
    load_dotenv()
except Exception:
    # .env is missing or unreadable - continue with environment variables or defaults
    pass


def _get_flag(name, default="OFF"):
    # Accepts: "ON", "OFF", "true", "false", "1", "0" (case-insensitive)
    return os.getenv(name, default).upper().strip() in ("ON", "TRUE", "1")


def _get_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        print(f"⚠️ [CONFIG] {name}={raw!r} is not a number. Using default {default}.")
        return default
    if value <= 0:
        print(f"⚠️ [CONFIG] {name} must be positive. Using default {default}.")
        return default
    return value


def _get_encoding(name, default):
    value = os.getenv(name, default).strip() or default
    try:
        codecs.lookup(value)
    except LookupError:
        print(f"⚠️ [CONFIG] {name}={value!r} is not a known encoding. Using default {default}.")
        return default
    return value


# --- OUTPUT ---
# Every generated file lands under this folder (relative to the working dir).
ROOT_FOLDER = os.getenv("AI2FS_ROOT_FOLDER", "generated-code")

# --- PATH SAFETY ---
# OFF (default): markers that are absolute or climb out of ROOT_FOLDER with ".."
# are rejected. ON: trust the transcript and write wherever it points.
ALLOW_UNSAFE_PATHS = _get_flag("AI2FS_ALLOW_UNSAFE_PATHS")

# --- INPUT ---
# Lines longer than this are always content, never markers.
MAX_LINE_LENGTH = _get_int("AI2FS_MAX_LINE_LENGTH", 4096)
INPUT_ENCODING = _get_encoding("AI2FS_INPUT_ENCODING", "utf-8")

# --- LOGGING ---
# Relative to the working directory, next to the generated output
LOG_DIR = os.getenv("AI2FS_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("AI2FS_LOG_LEVEL", "INFO").upper().strip()
LOG_TO_CONSOLE = _get_flag("AI2FS_LOG_TO_CONSOLE")
