import logging
from typing import List, Optional, Dict, Any
from time import time
from langchain.agents import AgentExecutor, create_tool_calling_agent
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.tools import BaseTool
from .prompts import ORCHESTRATOR_PROMPT
from .callbacks import ToolInvocationCallback
from ..stages.file_writer import WRITE_SUCCESS_PREFIX

logger = logging.getLogger(__name__)


class ToolCallingOrchestrator:
    """
    LLM-driven orchestrator.

    The model reads the tool descriptions and decides which tools to call and
    in what order. Nothing about the order is guaranteed; max_iterations is
    the only hard bound on the loop.
    """

    def __init__(self,
                 llm,
                 tools: List[BaseTool],
                 prompt: Optional[ChatPromptTemplate] = None,
                 output_dir: str = "movie_summaries",
                 max_iterations: int = 10,
                 verbose: bool = False):
        self._llm = llm
        self._tools = tools
        self._prompt = prompt or ORCHESTRATOR_PROMPT.partial(output_dir=output_dir)
        self._max_iterations = max_iterations
        self._verbose = verbose
        self.executor: Optional[AgentExecutor] = None

        self._build_executor()

    def _build_executor(self):
        """Constructs a LangChain tool-calling agent with provided tools and prompt."""
        agent_runnable = create_tool_calling_agent(
            llm=self._llm,
            tools=self._tools,
            prompt=self._prompt,
        )
        self.executor = AgentExecutor(
            agent=agent_runnable,
            tools=self._tools,
            verbose=self._verbose,
            handle_parsing_errors=True,
            max_iterations=self._max_iterations,
        )

    def run(self, user_query: str) -> Dict[str, Any]:
        """
        Let the model orchestrate the tools for one query.

        Model and network errors from the executor propagate to the caller.

        :param user_query: The operator's raw input
        :return: dict with answer, status, title, file_path, tools_used, tool_latency_ms
        """
        if not self.executor:
            raise RuntimeError("Agent executor not initialized.")

        tool_callback = ToolInvocationCallback()
        start = time()

        result_dict = self.executor.invoke(
            {"input": user_query},
            config={"callbacks": [tool_callback]},
        )

        logger.debug(f"Orchestrator finished in {int((time() - start) * 1000)}ms "
                     f"after tools: {tool_callback.tools_used}")

        answer = str(result_dict.get("output", "")).strip()
        write_output = tool_callback.last_output_of("file_writer_agent") or ""
        file_path = None
        if write_output.startswith(WRITE_SUCCESS_PREFIX):
            file_path = write_output[len(WRITE_SUCCESS_PREFIX):].strip()

        if not answer:
            answer = write_output or "The orchestrator finished without an answer."

        return {
            "answer": answer,
            "status": "done" if file_path else "failed",
            "title": tool_callback.last_output_of("title_refiner_agent"),
            "file_path": file_path,
            "tools_used": tool_callback.tools_used,
            "tool_latency_ms": tool_callback.get_total_tool_latency_ms(),
        }
