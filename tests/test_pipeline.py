"""
Tests for the fixed-order summary pipeline and the app wiring around it.
"""
from unittest.mock import Mock, patch

import pytest

from movie_summarizer.app import MovieSummarizerApp
from movie_summarizer.config import SummarizerConfig
from movie_summarizer.models import MovieRecord, SummaryDocument
from movie_summarizer.orchestration import SummaryPipeline, PipelineState
from movie_summarizer.schemas import FetchResult
from movie_summarizer.stages import FileWriter

from conftest import FakeChatModel


def _stages(tmp_path, refined="Dangal"):
    refiner = Mock()
    refiner.name = "title_refiner_agent"
    refiner.refine.return_value = refined

    fetcher = Mock()
    fetcher.name = "movie_fetcher_agent"

    formatter = Mock()
    formatter.format.return_value = SummaryDocument(filename="Dangal_summary.txt", content="== Dangal ==")

    writer = FileWriter(output_dir=str(tmp_path))
    return refiner, fetcher, formatter, writer


def _found(title):
    return FetchResult(title=title, record=MovieRecord(title="Dangal", year="2016"))


def _missing(title):
    return FetchResult(title=title, error="Movie not found!")


class TestSummaryPipeline:
    """Tests for SummaryPipeline."""

    def test_runs_stages_in_order(self, tmp_path):
        """Test that refine, fetch, format and write run once each in order."""
        refiner, fetcher, formatter, writer = _stages(tmp_path)
        fetcher.fetch.side_effect = _found
        pipeline = SummaryPipeline(refiner, fetcher, formatter, writer)

        result = pipeline.run("dangal amir")

        refiner.refine.assert_called_once_with("dangal amir")
        fetcher.fetch.assert_called_once_with("Dangal")
        formatter.format.assert_called_once()
        assert result["status"] == "done"
        assert pipeline.state == PipelineState.DONE
        assert result["tools_used"] == ["title_refiner_agent", "movie_fetcher_agent", "file_writer_agent"]
        assert result["file_path"] == str(tmp_path / "Dangal_summary.txt")
        assert (tmp_path / "Dangal_summary.txt").read_text(encoding="utf-8") == "== Dangal =="

    def test_falls_back_to_raw_query(self, tmp_path):
        """Test that the raw query is tried when the refined title is not found."""
        refiner, fetcher, formatter, writer = _stages(tmp_path, refined="Dangle")
        fetcher.fetch.side_effect = lambda t: _found(t) if t == "dangal" else _missing(t)

        result = SummaryPipeline(refiner, fetcher, formatter, writer).run("dangal")

        assert [c.args[0] for c in fetcher.fetch.call_args_list] == ["Dangle", "dangal"]
        assert result["status"] == "done"

    def test_same_title_is_not_fetched_twice(self):
        """Test that candidates are deduplicated and capped."""
        assert SummaryPipeline.fetch_candidates("Dangal", " dangal ", 2) == ["Dangal"]
        assert SummaryPipeline.fetch_candidates("Dangal", "dangal amir", 1) == ["Dangal"]

    def test_all_candidates_missing_writes_nothing(self, tmp_path):
        """Test that a run with no match fails without writing a file."""
        refiner, fetcher, formatter, writer = _stages(tmp_path, refined="Zzz")
        fetcher.fetch.side_effect = _missing
        pipeline = SummaryPipeline(refiner, fetcher, formatter, writer)

        result = pipeline.run("qqq")

        assert result["status"] == "failed"
        assert pipeline.state == PipelineState.FAILED
        assert result["file_path"] is None
        assert "Movie not found!" in result["answer"]
        formatter.format.assert_not_called()
        assert list(tmp_path.iterdir()) == []

    def test_write_error_fails_the_run(self, tmp_path):
        """Test that a write error marks the run failed."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        refiner, fetcher, formatter, _ = _stages(tmp_path)
        fetcher.fetch.side_effect = _found
        writer = FileWriter(output_dir=str(blocker / "out"))

        result = SummaryPipeline(refiner, fetcher, formatter, writer).run("dangal")

        assert result["status"] == "failed"
        assert result["answer"].startswith("Error writing file:")

    def test_refiner_error_propagates(self, tmp_path):
        """Test that stage exceptions propagate and leave the pipeline FAILED."""
        refiner, fetcher, formatter, writer = _stages(tmp_path)
        refiner.refine.side_effect = RuntimeError("quota exceeded")
        pipeline = SummaryPipeline(refiner, fetcher, formatter, writer)

        with pytest.raises(RuntimeError, match="quota exceeded"):
            pipeline.run("dangal")
        assert pipeline.state == PipelineState.FAILED
        fetcher.fetch.assert_not_called()


class TestEndToEnd:
    """End-to-end tests through MovieSummarizerApp."""

    def test_uri_bollywood_produces_summary_file(self, tmp_path, uri_payload):
        """Test the full flow from a rough title to a saved summary file."""
        summary = "\n".join([
            "=" * 40,
            "  Uri: The Surgical Strike (2019)",
            "=" * 40,
            "IMDb Rating: 8.2",
            "Cast: Vicky Kaushal, Paresh Rawal, Mohit Raina, Yami Gautam, Kirti Kulhari",
            "Genre: Action, Drama, History",
            "Director: Aditya Dhar",
            "Plot: A gripping retelling of the surgical strikes.",
        ])
        llm = FakeChatModel(
            responses=[
                "Uri: The Surgical Strike",
                "A gripping retelling of the surgical strikes.",
                "FILENAME: Uri_The_Surgical_Strike_summary.txt\nCONTENT:\n" + summary,
            ],
            structured_response=None,
        )
        config = SummarizerConfig(
            llm_api_key="test-llm-key",
            omdb_api_key="test-omdb-key",
            output_dir=str(tmp_path / "movie_summaries"),
        )
        app = MovieSummarizerApp(config, llm=llm)
        app.initialize()

        resp = Mock()
        resp.raise_for_status.return_value = None
        resp.json.return_value = uri_payload
        with patch("movie_summarizer.clients.omdb_client.requests.get", return_value=resp) as get:
            response = app.summarize("uri bollywood")

        assert get.call_args.kwargs["params"]["t"] == "Uri: The Surgical Strike"
        assert response.succeeded
        assert response.title == "Uri: The Surgical Strike"
        target = tmp_path / "movie_summaries" / "Uri_The_Surgical_Strike_summary.txt"
        assert response.file_path == str(target)
        content = target.read_text(encoding="utf-8")
        for section in ("Cast:", "Genre:", "Director:", "Plot:"):
            assert section in content
        assert response.latency_ms is not None

    def test_summarize_before_initialize(self):
        """Test that summarize before initialize raises."""
        app = MovieSummarizerApp(SummarizerConfig(llm_api_key="a", omdb_api_key="b"), llm=FakeChatModel())
        with pytest.raises(RuntimeError):
            app.summarize("dangal")
