"""
Public application facade for the movie summarizer.

All dependency wiring happens here. The chat model is created once and
handed to every stage; nothing holds it globally.
"""
import logging
from typing import Any, Optional
from .config import SummarizerConfig
from .schemas import SummaryResponse
from .service import MovieSummarizerService
from .llm_factory import get_llm_instance
from .clients import OmdbClient
from .stages import TitleRefiner, MovieFetcher, SummaryFormatter, FileWriter
from .orchestration import SummaryPipeline
from .tools import build_agent_tools

logger = logging.getLogger(__name__)


class MovieSummarizerApp:
    """
    Usage:
        config = load_config_from_env()
        app = MovieSummarizerApp(config)
        app.initialize()
        response = app.summarize("uri bollywood")
    """

    def __init__(self, config: SummarizerConfig, llm: Optional[Any] = None):
        """
        :param config: SummarizerConfig instance
        :param llm: Chat model to use instead of building one from config
        """
        self._config = config
        self._llm = llm
        self._service: Optional[MovieSummarizerService] = None

    def initialize(self) -> None:
        """Build the model, the stages and the orchestrator. Safe to call twice."""
        if self._service:
            return

        config = self._config
        if self._llm is None:
            self._llm = get_llm_instance(
                provider=config.llm_provider,
                model=config.llm_model,
                api_key=config.llm_api_key,
                temperature=config.llm_temperature,
            )

        omdb = OmdbClient(
            api_key=config.omdb_api_key,
            base_url=config.omdb_base_url,
            timeout=config.omdb_timeout,
        )
        refiner = TitleRefiner(self._llm)
        fetcher = MovieFetcher(self._llm, omdb, enhance_plot=config.enhance_plot)
        formatter = SummaryFormatter(self._llm)
        writer = FileWriter(output_dir=config.output_dir, default_filename=config.default_filename)

        if config.orchestration_mode == "agent":
            # Imported lazily: the executor pulls in the full langchain package.
            from .agent.tool_calling_agent import ToolCallingOrchestrator

            orchestrator = ToolCallingOrchestrator(
                llm=self._llm,
                tools=build_agent_tools(refiner, fetcher, formatter, writer),
                output_dir=config.output_dir,
                max_iterations=config.agent_max_iterations,
                verbose=config.verbose,
            )
        else:
            orchestrator = SummaryPipeline(
                refiner=refiner,
                fetcher=fetcher,
                formatter=formatter,
                writer=writer,
                max_fetch_attempts=config.max_fetch_attempts,
            )

        logger.info(f"Using {config.orchestration_mode} orchestration")
        self._service = MovieSummarizerService(config)
        self._service.set_orchestrator(orchestrator)

    def summarize(self, query: str) -> SummaryResponse:
        """
        :raises: RuntimeError if initialize() has not been called
        """
        if not self._service:
            raise RuntimeError("App not initialized. Call initialize() first.")

        return self._service.summarize(query)
