import logging

from langchain_core.output_parsers import StrOutputParser

from ..agent.prompts import PLOT_ENHANCER_PROMPT
from ..clients import OmdbClient
from ..exceptions import MovieLookupError
from ..models import MovieRecord
from ..schemas import FetchResult

logger = logging.getLogger(__name__)


class MovieFetcher:
    """
    Looks a title up on OMDb and rewrites its plot to read better.

    Lookup problems never raise out of fetch(); they come back inside the
    FetchResult so the caller can report them as text.
    """

    name = "movie_fetcher_agent"

    def __init__(self, llm, omdb_client: OmdbClient, enhance_plot: bool = True):
        self._omdb = omdb_client
        self._enhance_plot = enhance_plot
        self._plot_chain = PLOT_ENHANCER_PROMPT | llm | StrOutputParser()

    def fetch(self, title: str) -> FetchResult:
        logger.info(f"Invoking agent: {self.name}")
        title = (title or "").strip()

        try:
            payload = self._omdb.get_by_title(title)
        except MovieLookupError as e:
            logger.warning(f"Movie lookup failed for {title!r}: {e}")
            return FetchResult(title=title, error=str(e))

        record = MovieRecord.from_omdb(payload)
        if not record.title:
            record.title = title

        if self._enhance_plot and record.plot:
            record.plot = self._enhanced_plot(record)

        return FetchResult(title=title, record=record)

    def _enhanced_plot(self, record: MovieRecord) -> str:
        try:
            enhanced = self._plot_chain.invoke({
                "title": record.title,
                "year": record.year or "unknown year",
                "plot": record.plot,
            }).strip()
        except Exception as e:
            logger.warning(f"Plot enhancement failed for '{record.title}', keeping original plot: {e}")
            return record.plot
        return enhanced or record.plot
