"""
LangChain callbacks for observing which tools the orchestrator calls.
"""
import logging
from typing import Dict, Any, List, Optional
from time import time
from langchain_core.callbacks import BaseCallbackHandler

logger = logging.getLogger(__name__)


class ToolInvocationCallback(BaseCallbackHandler):
    """
    Records every tool call made during one orchestrator run.

    Keeps the call order, each tool's output, and the accumulated time
    spent inside tools.
    """

    def __init__(self):
        super().__init__()
        self._start_times: Dict[Any, float] = {}
        self._names: Dict[Any, str] = {}
        self._total_tool_time: float = 0.0
        self.tools_used: List[str] = []
        self.outputs: List[tuple] = []

    def on_tool_start(
        self,
        serialized: Dict[str, Any],
        input_str: str,
        *,
        run_id: Any,
        parent_run_id: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        tool_name = (serialized or {}).get("name") or kwargs.get("name") or "unknown_tool"
        logger.debug(f"Tool {tool_name} started with input: {str(input_str)[:200]}")
        self._names[run_id] = tool_name
        self._start_times[run_id] = time()
        self.tools_used.append(tool_name)

    def on_tool_end(
        self,
        output: Any,
        *,
        run_id: Any,
        parent_run_id: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        self._stop(run_id)
        # Newer LangChain versions hand over a ToolMessage rather than a string.
        text = getattr(output, "content", output)
        self.outputs.append((self._names.get(run_id, "unknown_tool"), str(text)))

    def on_tool_error(
        self,
        error: BaseException,
        *,
        run_id: Any,
        parent_run_id: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        logger.warning(f"Tool {self._names.get(run_id, 'unknown_tool')} failed: {error}")
        self._stop(run_id)

    def _stop(self, run_id: Any) -> None:
        if run_id in self._start_times:
            self._total_tool_time += time() - self._start_times.pop(run_id)

    def get_total_tool_latency_ms(self) -> int:
        """Total time spent inside tools, in milliseconds."""
        return int(self._total_tool_time * 1000)

    def last_output_of(self, tool_name: str) -> Optional[str]:
        for name, text in reversed(self.outputs):
            if name == tool_name:
                return text
        return None
