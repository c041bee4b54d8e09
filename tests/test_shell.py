"""
Tests for the interactive shell loop. Input is scripted; nothing touches a terminal.
"""
from unittest.mock import Mock

from movie_summarizer.cli import MovieSummarizerShell
from movie_summarizer.schemas import SummaryResponse


def _shell(lines, summarize=None):
    feed = iter(lines)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    output = []
    summarize = summarize or Mock(return_value=SummaryResponse(answer="saved", status="done"))
    shell = MovieSummarizerShell(summarize, input_func=fake_input, output=output.append)
    return shell, summarize, output


class TestMovieSummarizerShell:
    """Tests for MovieSummarizerShell."""

    def test_each_title_is_summarized_once(self):
        """Test that each entered title triggers exactly one summarize call."""
        shell, summarize, output = _shell(["dangal", "uri bollywood", "quit"])

        assert shell.run() == 0
        assert [c.args[0] for c in summarize.call_args_list] == ["dangal", "uri bollywood"]
        assert "saved\n" in output

    def test_quit_in_any_case_stops_without_summarizing(self):
        """Test that quit ends the loop whatever its letter case."""
        for word in ("quit", "QUIT", "Quit", "  qUiT  "):
            shell, summarize, _ = _shell([word, "dangal"])
            assert shell.run() == 0
            summarize.assert_not_called()

    def test_blank_lines_reprompt(self):
        """Test that blank lines re-prompt without calling summarize."""
        shell, summarize, output = _shell(["", "   ", "\t", "quit"])

        shell.run()

        summarize.assert_not_called()
        assert output.count("Please enter a movie title.\n") == 3

    def test_errors_are_reported_and_loop_continues(self):
        """Test that a failing call is reported and the next title still runs."""
        summarize = Mock(side_effect=[RuntimeError("boom"), SummaryResponse(answer="ok", status="done")])
        shell, _, output = _shell(["first", "second", "quit"], summarize=summarize)

        assert shell.run() == 0
        assert summarize.call_count == 2
        assert "Error occurred while processing movie. Please try again.\n" in output
        assert "Error details: boom\n" in output
        assert "ok\n" in output

    def test_end_of_input_exits_cleanly(self):
        """Test that end of input exits with status 0."""
        shell, summarize, _ = _shell(["dangal"])

        assert shell.run() == 0
        summarize.assert_called_once_with("dangal")

    def test_failed_status_answer_is_printed(self):
        """Test that a failed run's answer is shown to the user."""
        summarize = Mock(return_value=SummaryResponse(answer="Error fetching movie details", status="failed"))
        shell, _, output = _shell(["zzz", "quit"], summarize=summarize)

        shell.run()

        assert "Error fetching movie details\n" in output
