import logging
from typing import Any

# Provider integrations are optional extras; only the configured one must be installed.
try:
    from langchain_google_genai import ChatGoogleGenerativeAI
except ImportError:
    ChatGoogleGenerativeAI = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None

try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

logger = logging.getLogger(__name__)


PROVIDER_API_KEYS = {
    "google": "GOOGLE_API_KEY",
    "openai": "OPENAI_API_KEY",
    "groq": "GROQ_API_KEY",
}

DEFAULT_MODELS = {
    "google": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
    "groq": "llama-3.1-8b-instant",
}


def get_llm_instance(provider: str, model: str, api_key: str, temperature: float = 0.7) -> Any:
    """
    Factory to return a ready-to-use chat model for the given provider.

    The returned instance is shared by every stage of one app; callers pass it
    around explicitly.

    :param provider: 'google', 'openai' or 'groq'
    :param model: model name
    :param api_key: provider API key
    :param temperature: sampling temperature
    :return: LangChain chat model
    """
    provider = provider.lower()
    logger.info(f"Creating {provider} chat model '{model}'")

    if provider == "google":
        if ChatGoogleGenerativeAI is None:
            raise ImportError("langchain_google_genai not installed")
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
        )

    elif provider == "openai":
        if ChatOpenAI is None:
            raise ImportError("langchain_openai not installed")
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            streaming=False,
        )

    elif provider == "groq":
        if ChatGroq is None:
            raise ImportError("langchain_groq not installed")
        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=temperature,
            streaming=False,  # disable streaming to reduce function-call issues
        )

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
