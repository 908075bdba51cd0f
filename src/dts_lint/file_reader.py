"""Source file reading with encoding fallback."""
from pathlib import Path

from dts_lint.logging_config import get_logger

logger = get_logger(__name__)


def read_source_file(file_path: Path) -> str | None:
    """Read a source file as text.

    Tries UTF-8 first (dropping a byte order mark), falls back to latin-1.

    Args:
        file_path: Path to the file

    Returns:
        File content, or None if the file cannot be read
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        # latin-1 accepts all byte sequences
        logger.warning(f"File {file_path} is not valid UTF-8, reading as latin-1")
        return file_path.read_text(encoding="latin-1")
    except FileNotFoundError:
        logger.warning(f"File not found, skipping: {file_path}")
        return None
    except OSError as e:
        logger.warning(f"Error reading file {file_path}, skipping: {e}")
        return None
