from ..models import SummaryDocument

DEFAULT_FILENAME = "movie_summary.txt"

FILENAME_MARKER = "FILENAME:"
CONTENT_MARKER = "CONTENT:"


class SummaryOutputParser:
    @staticmethod
    def parse(text: str, default_filename: str = DEFAULT_FILENAME) -> SummaryDocument:
        """
        Split free-text formatter output into a filename and a body.

        Expected shape:
            FILENAME: Dangal_summary.txt
            CONTENT:
            ...body...

        Without a FILENAME line the default name is used and the whole text
        is the body. Without a CONTENT line the whole text is the body too.
        The body is everything after the CONTENT line, untouched.
        """
        lines = text.split("\n")
        filename = default_filename
        content = text

        for line in lines:
            if line.lstrip().startswith(FILENAME_MARKER):
                filename = line.lstrip()[len(FILENAME_MARKER):].strip() or default_filename

                content_index = next(
                    (i for i, l in enumerate(lines) if l.lstrip().startswith(CONTENT_MARKER)),
                    None,
                )
                if content_index is not None:
                    content = "\n".join(lines[content_index + 1:])
                break

        return SummaryDocument(filename=filename, content=content)


def parse_formatter_output(text: str, default_filename: str = DEFAULT_FILENAME) -> SummaryDocument:
    return SummaryOutputParser.parse(text, default_filename=default_filename)
