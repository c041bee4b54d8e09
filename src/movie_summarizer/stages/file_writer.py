import logging
import os
import re
from pathlib import Path
from typing import Optional

from ..agent.output_parser import DEFAULT_FILENAME, SummaryOutputParser
from ..models import SummaryDocument

logger = logging.getLogger(__name__)

WRITE_ERROR_PREFIX = "Error writing file"
WRITE_SUCCESS_PREFIX = "Movie summary successfully written to:"


def filename_from_title(title: str) -> str:
    """'Uri: The Surgical Strike' -> 'Uri_The_Surgical_Strike_summary.txt'"""
    stem = re.sub(r"[^\w]+", "_", title or "").strip("_")
    return f"{stem}_summary.txt" if stem else DEFAULT_FILENAME


class FileWriter:
    """
    Persists summary documents under a single output directory.

    Existing files are overwritten. Filesystem errors are returned as text,
    never raised.
    """

    name = "file_writer_agent"

    def __init__(self, output_dir: str = "movie_summaries", default_filename: str = DEFAULT_FILENAME):
        self.output_dir = output_dir
        self.default_filename = default_filename
        self.last_written_path: Optional[str] = None

    def resolve_dir(self) -> Path:
        """Output directory, relative paths taken from the current working directory."""
        path = Path(self.output_dir)
        if not path.is_absolute():
            path = Path(os.getcwd()) / path
        return path

    def write(self, document: SummaryDocument) -> str:
        logger.info(f"Invoking agent: {self.name}")
        # Only the last path component is used so nothing lands outside the directory.
        filename = Path(document.filename.strip()).name or self.default_filename
        summaries_dir = self.resolve_dir()
        file_path = summaries_dir / filename

        try:
            summaries_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8", newline="") as fh:
                fh.write(document.content)
        except OSError as e:
            logger.error(f"File writing error: {e}")
            return f"{WRITE_ERROR_PREFIX}: {e}"

        self.last_written_path = str(file_path)
        logger.info(f"File successfully saved at: {file_path}")
        return f"{WRITE_SUCCESS_PREFIX} {file_path}"

    def write_blob(self, text: str) -> str:
        """Write formatter output that uses the FILENAME:/CONTENT: markers."""
        return self.write(SummaryOutputParser.parse(text, default_filename=self.default_filename))
