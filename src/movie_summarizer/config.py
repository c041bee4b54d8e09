from dataclasses import dataclass


@dataclass
class SummarizerConfig:
    # Secrets
    llm_api_key: str
    omdb_api_key: str

    # LLM
    llm_provider: str = "google"
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7

    # Movie database
    omdb_base_url: str = "http://www.omdbapi.com/"
    omdb_timeout: float = 10.0

    # Output
    output_dir: str = "movie_summaries"
    default_filename: str = "movie_summary.txt"

    # Orchestration
    orchestration_mode: str = "pipeline"
    max_fetch_attempts: int = 2
    agent_max_iterations: int = 10
    enhance_plot: bool = True

    verbose: bool = False
