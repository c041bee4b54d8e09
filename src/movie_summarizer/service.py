import logging
from typing import Optional, Protocol, Dict, Any
from time import time

from .config import SummarizerConfig
from .exceptions import AppNotInitializedError
from .schemas import SummaryResponse

logger = logging.getLogger(__name__)


class Orchestrator(Protocol):
    def run(self, user_query: str) -> Dict[str, Any]:
        ...


class MovieSummarizerService:
    """
    Facade over the orchestration subsystem.
    The only thing the shell talks to.
    """

    def __init__(self, config: SummarizerConfig):
        self.config = config
        self._orchestrator: Optional[Orchestrator] = None

    def set_orchestrator(self, orchestrator: Orchestrator) -> None:
        """Inject the orchestrator (deterministic pipeline or tool-calling agent)."""
        self._orchestrator = orchestrator

    def summarize(self, user_query: str) -> SummaryResponse:
        """
        Resolve one query into a summary file.

        Errors raised by the orchestrator are not caught here.
        """
        if not self._orchestrator:
            raise AppNotInitializedError("Orchestrator is not initialized.")

        start_time = time()
        result = self._orchestrator.run(user_query)
        latency_ms = int((time() - start_time) * 1000)

        logger.info(
            f"Query {user_query!r} finished with status={result.get('status')} "
            f"in {latency_ms}ms (tools: {result.get('tools_used')})"
        )

        return SummaryResponse(
            answer=result.get("answer", ""),
            status=result.get("status", "failed"),
            title=result.get("title"),
            file_path=result.get("file_path"),
            tools_used=list(result.get("tools_used") or []),
            latency_ms=latency_ms,
            tool_latency_ms=result.get("tool_latency_ms"),
        )
