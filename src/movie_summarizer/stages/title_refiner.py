import logging

from langchain_core.output_parsers import StrOutputParser

from ..agent.prompts import TITLE_REFINER_PROMPT

logger = logging.getLogger(__name__)

_QUOTES = "\"'`“”‘’"


class TitleRefiner:
    """Corrects spelling and completes partial movie titles with one model call."""

    name = "title_refiner_agent"

    def __init__(self, llm):
        self._chain = TITLE_REFINER_PROMPT | llm | StrOutputParser()

    def refine(self, query: str) -> str:
        """
        Return the best-guess full title for ``query``.

        Model failures are not caught here; the caller decides what to do.
        If the model answers with nothing usable the input comes back as-is.
        """
        if not query or not query.strip():
            raise ValueError("Movie title query must not be empty")

        logger.info(f"Invoking agent: {self.name}")
        raw = self._chain.invoke({"query": query.strip()})

        # Models sometimes answer on several lines; the title is the first one.
        lines = [line for line in raw.strip().splitlines() if line.strip()]
        title = lines[0].strip().strip(_QUOTES).strip() if lines else ""

        if not title:
            logger.warning(f"Refiner returned nothing for {query!r}; keeping input")
            return query.strip()

        logger.debug(f"Refined {query!r} -> {title!r}")
        return title
