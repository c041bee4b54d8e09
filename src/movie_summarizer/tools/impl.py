from typing import Any
from pydantic import Field, BaseModel
from langchain_core.tools import BaseTool


class AgentQueryArgs(BaseModel):
    query: str = Field(description="Text input for the agent")


class TitleRefinerTool(BaseTool):
    """
    LangChain adapter for TitleRefiner.
    Exposes title correction to the tool-calling orchestrator.
    """

    name: str = "title_refiner_agent"
    description: str = (
        "Refine and correct movie titles, fix spelling mistakes, complete partial titles, "
        "and provide the most accurate movie title. Input is the user's rough title."
    )
    args_schema: type[BaseModel] = AgentQueryArgs
    refiner: Any = Field(default=None)

    def _run(self, query: str) -> str:
        return self.refiner.refine(query)

    async def _arun(self, query: str) -> str:
        return self._run(query)


class MovieFetcherTool(BaseTool):
    """
    LangChain adapter for MovieFetcher.

    Lookup failures come back as text so the orchestrator can decide to
    refine the title and try again.
    """

    name: str = "movie_fetcher_agent"
    description: str = (
        "Fetch movie details from OMDB using the provided movie title and enhance the plot summary. "
        "Returns JSON with title, year, imdbRating, cast, genre, director, plot, runtime and rated, "
        "or an error message if the movie could not be found."
    )
    args_schema: type[BaseModel] = AgentQueryArgs
    fetcher: Any = Field(default=None)

    def _run(self, query: str) -> str:
        return self.fetcher.fetch(query).to_text()

    async def _arun(self, query: str) -> str:
        return self._run(query)


class FileWriterTool(BaseTool):
    """
    Formats movie data into a decorated document and saves it.

    Input is not validated as JSON; whatever text arrives is handed to the
    formatter as movie data.
    """

    name: str = "file_writer_agent"
    description: str = (
        "Format movie details (JSON from movie_fetcher_agent) into a beautiful text file, "
        "save it, and return the saved file path."
    )
    args_schema: type[BaseModel] = AgentQueryArgs
    formatter: Any = Field(default=None)
    writer: Any = Field(default=None)

    def _run(self, query: str) -> str:
        return self.writer.write_blob(self.formatter.format_text(query))

    async def _arun(self, query: str) -> str:
        return self._run(query)
