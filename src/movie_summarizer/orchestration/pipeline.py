"""
Deterministic summary pipeline.

Runs the stages in a fixed order:
1. Title refiner -> corrected title
2. Movie fetcher -> movie record (falls back to the raw query once)
3. Summary formatter -> SummaryDocument
4. File writer -> saved file
"""
import logging
from enum import Enum
from time import time
from typing import Any, Dict, List, Optional

from ..schemas import FetchResult
from ..stages import TitleRefiner, MovieFetcher, SummaryFormatter, FileWriter
from ..stages.file_writer import WRITE_ERROR_PREFIX

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    IDLE = "idle"
    TOOL_EXECUTING = "tool_executing"
    DONE = "done"
    FAILED = "failed"


class SummaryPipeline:
    """
    Fixed-order replacement for the LLM-driven orchestrator.

    Refiner and formatter model errors propagate. Fetch failures and write
    failures end the run in the FAILED state with a readable answer.
    """

    def __init__(
        self,
        refiner: TitleRefiner,
        fetcher: MovieFetcher,
        formatter: SummaryFormatter,
        writer: FileWriter,
        max_fetch_attempts: int = 2,
    ):
        self.refiner = refiner
        self.fetcher = fetcher
        self.formatter = formatter
        self.writer = writer
        self.max_fetch_attempts = max(1, max_fetch_attempts)
        self.state = PipelineState.IDLE

    @staticmethod
    def fetch_candidates(refined_title: str, raw_query: str, limit: int) -> List[str]:
        """Titles to try in order: the refined one, then the raw input, without repeats."""
        candidates: List[str] = []
        seen = set()
        for title in (refined_title, raw_query):
            key = (title or "").strip().lower()
            if key and key not in seen:
                seen.add(key)
                candidates.append(title.strip())
        return candidates[:limit]

    def run(self, user_query: str) -> Dict[str, Any]:
        tools_used: List[str] = []
        tool_time = 0.0
        self.state = PipelineState.TOOL_EXECUTING

        try:
            step_start = time()
            tools_used.append(self.refiner.name)
            title = self.refiner.refine(user_query)
            tool_time += time() - step_start

            fetched: Optional[FetchResult] = None
            for candidate in self.fetch_candidates(title, user_query, self.max_fetch_attempts):
                step_start = time()
                tools_used.append(self.fetcher.name)
                fetched = self.fetcher.fetch(candidate)
                tool_time += time() - step_start
                if fetched.ok:
                    break
                logger.info(f"No movie data for {candidate!r}, trying next candidate")

            if fetched is None or not fetched.ok:
                self.state = PipelineState.FAILED
                return self._result(
                    answer=fetched.to_text() if fetched else f"Could not look up '{user_query}'.",
                    title=title,
                    tools_used=tools_used,
                    tool_time=tool_time,
                )

            step_start = time()
            tools_used.append(self.writer.name)
            document = self.formatter.format(fetched.record)
            outcome = self.writer.write(document)
            tool_time += time() - step_start
        except Exception:
            self.state = PipelineState.FAILED
            raise

        if outcome.startswith(WRITE_ERROR_PREFIX):
            self.state = PipelineState.FAILED
            return self._result(outcome, fetched.record.title, tools_used, tool_time)

        self.state = PipelineState.DONE
        return self._result(
            outcome,
            fetched.record.title,
            tools_used,
            tool_time,
            file_path=self.writer.last_written_path,
        )

    def _result(self, answer, title, tools_used, tool_time, file_path=None) -> Dict[str, Any]:
        return {
            "answer": answer,
            "status": self.state.value,
            "title": title,
            "file_path": file_path,
            "tools_used": tools_used,
            "tool_latency_ms": int(tool_time * 1000),
        }
