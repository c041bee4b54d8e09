from .impl import TitleRefinerTool, MovieFetcherTool, FileWriterTool


def build_agent_tools(refiner, fetcher, formatter, writer) -> list:
    """The three tools offered to the tool-calling orchestrator."""
    return [
        FileWriterTool(formatter=formatter, writer=writer),
        TitleRefinerTool(refiner=refiner),
        MovieFetcherTool(fetcher=fetcher),
    ]


__all__ = [
    "TitleRefinerTool",
    "MovieFetcherTool",
    "FileWriterTool",
    "build_agent_tools",
]
