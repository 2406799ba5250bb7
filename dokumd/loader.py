"""
Reading source documents and splitting them into lines.
"""

from pathlib import Path


class FileLoadError(Exception):
    """Raised when a source document cannot be read."""
    pass


def split_lines(text: str) -> list[str]:
    """
    Split text into lines, folding CRLF and bare CR line endings to LF.

    A trailing line terminator yields a final empty line, so joining the
    result with ``"\\n"`` gives back the normalized text.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def load_text(file_path: Path | str) -> str:
    """
    Load a document as text.

    Args:
        file_path: Path to the document.

    Returns:
        The document contents, with undecodable bytes replaced.

    Raises:
        FileLoadError: If the file does not exist or cannot be read.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileLoadError(f'Unable to load "{path}": file not found')

    try:
        # newline="" keeps CR/CRLF so split_lines sees the original endings
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        raise FileLoadError(f'Unable to load "{path}": {e}') from e
