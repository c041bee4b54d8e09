"""
Configuration loader with validation.
"""
from dotenv import find_dotenv, load_dotenv
from .config import SummarizerConfig
from .config_validator import get_required_env, get_optional_env, get_int_env, get_float_env
from .exceptions import ConfigurationError
from .llm_factory import PROVIDER_API_KEYS, DEFAULT_MODELS

ORCHESTRATION_MODES = ("pipeline", "agent")


def load_config_from_env(**overrides) -> SummarizerConfig:
    """
    Load configuration from environment variables with validation.

    Secrets are checked before anything else so a missing key stops the
    program before any network or model call is made.

    Usage:
        config = load_config_from_env(orchestration_mode="agent")
        app = MovieSummarizerApp(config)
        app.initialize()

    :param overrides: Field values that win over the environment (e.g. CLI flags)
    :return: Validated SummarizerConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    # Load .env from the working directory (or a parent) if it exists
    load_dotenv(find_dotenv(usecwd=True))

    provider = (overrides.pop("llm_provider", None)
                or get_optional_env("LLM_PROVIDER", "google")).lower()
    if provider not in PROVIDER_API_KEYS:
        raise ConfigurationError(
            f"Unknown LLM_PROVIDER '{provider}'. "
            f"Choose one of: {', '.join(PROVIDER_API_KEYS)}"
        )

    llm_api_key = get_required_env(
        PROVIDER_API_KEYS[provider],
        description=f"API key for the {provider} chat model",
    )
    omdb_api_key = get_required_env(
        "OMDB_API_KEY",
        description="OMDb API key (get one from https://www.omdbapi.com/apikey.aspx)",
    )

    values = dict(
        llm_api_key=llm_api_key,
        omdb_api_key=omdb_api_key,
        llm_provider=provider,
        llm_model=get_optional_env("LLM_MODEL", DEFAULT_MODELS[provider]),
        llm_temperature=get_float_env("LLM_TEMPERATURE", 0.7),
        omdb_base_url=get_optional_env("OMDB_BASE_URL", "http://www.omdbapi.com/"),
        omdb_timeout=get_float_env("OMDB_TIMEOUT", 10.0),
        output_dir=get_optional_env("MOVIE_SUMMARIES_DIR", "movie_summaries"),
        orchestration_mode=get_optional_env("ORCHESTRATION_MODE", "pipeline").lower(),
        max_fetch_attempts=get_int_env("MAX_FETCH_ATTEMPTS", 2),
        agent_max_iterations=get_int_env("AGENT_MAX_ITERATIONS", 10),
        enhance_plot=get_optional_env("ENHANCE_PLOT", "true").lower() == "true",
        verbose=get_optional_env("VERBOSE", "false").lower() == "true",
    )
    values.update({k: v for k, v in overrides.items() if v is not None})

    if values["orchestration_mode"] not in ORCHESTRATION_MODES:
        raise ConfigurationError(
            f"Unknown ORCHESTRATION_MODE '{values['orchestration_mode']}'. "
            f"Choose one of: {', '.join(ORCHESTRATION_MODES)}"
        )

    return SummarizerConfig(**values)
