import os
import ntpath

from ai2fs.utils.errors import OutputCreateError
from ai2fs.utils.logger import setup_logger

logger = setup_logger("Filesystem")

# Owner-only (rwx------), same as mkdir(path, S_IRWXU)
DIR_MODE = 0o700


def prepare_root(root):
    """
    Creates the output root if it is missing. An existing root is fine.
    Raises OSError if the root cannot be created (the caller treats that as fatal).
    """
    os.makedirs(root, mode=DIR_MODE, exist_ok=True)
    logger.info(f"📁 Output root ready: {root}", extra={"root": os.path.abspath(root)})
    return root


def normalize_relative_path(rel_path):
    """Treats Windows separators as '/' so 'src\\app.js' lands in src/."""
    return rel_path.replace("\\", "/")


def resolve_output_path(root, rel_path, allow_unsafe=False):
    """
    Maps a marker path onto a filesystem path under root.
    Returns (full_path, error_msg). error_msg is None when the path is usable.
    """
    rel_path = normalize_relative_path(rel_path)

    if not allow_unsafe:
        # Absolute paths and drive letters would ignore root entirely
        if rel_path.startswith("/") or ntpath.splitdrive(rel_path)[0]:
            return None, "absolute paths are not allowed"

    full_path = os.path.normpath(os.path.join(root, rel_path))

    if not allow_unsafe:
        # Security check: Ensure we stay within the output root
        root_abs = os.path.abspath(root)
        full_abs = os.path.abspath(full_path)
        if full_abs == root_abs or os.path.commonpath([root_abs, full_abs]) != root_abs:
            return None, "path escapes the output root"

    return full_path, None


def create_directories(full_path):
    """
    Creates every directory on the way to full_path (not the file itself).
    Directories that already exist are not an error.
    """
    parent = os.path.dirname(full_path)
    if not parent:
        return
    try:
        os.makedirs(parent, mode=DIR_MODE, exist_ok=True)
    except (OSError, ValueError) as e:
        raise OutputCreateError(full_path, getattr(e, "strerror", None) or str(e)) from e


def write_file(full_path, content, encoding="utf-8"):
    """
    Writes the whole content in one call, truncating any existing file.
    newline='' keeps the transcript's own line endings untouched.
    """
    create_directories(full_path)
    try:
        with open(full_path, 'w', encoding=encoding, errors='surrogateescape', newline='') as f:
            f.write(content)
    except (OSError, ValueError) as e:
        raise OutputCreateError(full_path, getattr(e, "strerror", None) or str(e)) from e
    logger.info(f"✅ Wrote {full_path}", extra={"path": full_path, "chars": len(content)})
