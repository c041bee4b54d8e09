"""
Shared fixtures: scripted LangChain chat models and OMDb payloads.
"""
from typing import Any, List, Optional, Union

import pytest
from pydantic import Field
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatResult, ChatGeneration
from langchain_core.runnables import RunnableLambda


class FakeChatModel(BaseChatModel):
    """LangChain-compatible chat model that replays scripted replies."""

    responses: List[Union[str, AIMessage]] = Field(default_factory=list)
    structured_response: Any = None
    calls: List[List[BaseMessage]] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "fake-chat"

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[Any] = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.calls.append(messages)
        reply = self.responses.pop(0) if self.responses else ""
        message = reply if isinstance(reply, AIMessage) else AIMessage(content=reply)
        return ChatResult(generations=[ChatGeneration(message=message)])

    def bind_tools(self, tools: Any, **kwargs: Any):
        return self

    def with_structured_output(self, schema: Any, **kwargs: Any):
        return RunnableLambda(lambda _prompt: self.structured_response)


class FailingChatModel(BaseChatModel):
    """Chat model whose every call fails, like an unreachable provider."""

    @property
    def _llm_type(self) -> str:
        return "failing-chat"

    def _generate(self, messages, stop=None, run_manager=None, **kwargs) -> ChatResult:
        raise RuntimeError("model unavailable")

    def bind_tools(self, tools: Any, **kwargs: Any):
        return self


URI_PAYLOAD = {
    "Title": "Uri: The Surgical Strike",
    "Year": "2019",
    "Rated": "Not Rated",
    "Runtime": "138 min",
    "Genre": "Action, Drama, History",
    "Director": "Aditya Dhar",
    "Actors": "Vicky Kaushal, Paresh Rawal, Mohit Raina, Yami Gautam, Kirti Kulhari, Rajit Kapoor",
    "Plot": "Indian army special forces execute a covert operation to avenge the killing of fellow army men.",
    "imdbRating": "8.2",
    "Response": "True",
}


@pytest.fixture
def fake_llm():
    return FakeChatModel()


@pytest.fixture
def uri_payload():
    return dict(URI_PAYLOAD)


CONFIG_KEYS = (
    "LLM_PROVIDER", "LLM_MODEL", "LLM_TEMPERATURE",
    "GOOGLE_API_KEY", "OPENAI_API_KEY", "GROQ_API_KEY",
    "OMDB_API_KEY", "OMDB_BASE_URL", "OMDB_TIMEOUT",
    "MOVIE_SUMMARIES_DIR", "ORCHESTRATION_MODE", "MAX_FETCH_ATTEMPTS",
    "AGENT_MAX_ITERATIONS", "ENHANCE_PLOT", "VERBOSE",
)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Clean environment without any .env file being picked up."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("movie_summarizer.config_loader.load_dotenv", lambda *a, **k: False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
