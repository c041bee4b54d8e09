"""
Pipeline stages. Each one wraps a single responsibility and receives the
chat model it needs from the caller.
"""

from .title_refiner import TitleRefiner
from .movie_fetcher import MovieFetcher
from .file_writer import FileWriter, filename_from_title
from .summary_formatter import SummaryFormatter

__all__ = [
    "TitleRefiner",
    "MovieFetcher",
    "FileWriter",
    "SummaryFormatter",
    "filename_from_title",
]
