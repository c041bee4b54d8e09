import logging
from typing import Any

from langchain_core.output_parsers import StrOutputParser
from pydantic import ValidationError

from ..agent.output_parser import SummaryOutputParser
from ..agent.prompts import SUMMARY_DOCUMENT_PROMPT, SUMMARY_TEXT_PROMPT
from ..models import MovieRecord, SummaryDocument
from .file_writer import filename_from_title

logger = logging.getLogger(__name__)


class SummaryFormatter:
    """
    Renders movie data into a decorated text document.

    format() asks the model for a structured SummaryDocument. format_text()
    is the free-text variant with FILENAME:/CONTENT: markers, used when the
    input is arbitrary text rather than a MovieRecord.
    """

    def __init__(self, llm):
        self._llm = llm
        self._text_chain = SUMMARY_TEXT_PROMPT | llm | StrOutputParser()

    def format(self, record: MovieRecord) -> SummaryDocument:
        structured_llm = self._llm.with_structured_output(SummaryDocument)
        result: Any = (SUMMARY_DOCUMENT_PROMPT | structured_llm).invoke(
            {"movie_data": record.to_json()}
        )

        if isinstance(result, dict):
            try:
                result = SummaryDocument.model_validate(result)
            except ValidationError as e:
                logger.warning(f"Structured formatting returned an incomplete document: {e}")
                result = None

        if result is None or not result.content.strip():
            logger.warning("Structured formatting came back empty; using marker format")
            result = SummaryOutputParser.parse(
                self.format_text(record.to_json()),
                default_filename=filename_from_title(record.title),
            )

        if not result.filename.strip():
            result.filename = filename_from_title(record.title)

        return result

    def format_text(self, movie_data: str) -> str:
        return self._text_chain.invoke({"movie_data": movie_data})
