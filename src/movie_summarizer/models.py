from typing import Any, Dict, List, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_CAST = 5


def _clean(value: Any) -> str:
    """OMDb reports missing values as the literal string 'N/A'."""
    if value is None:
        return ""
    text = str(value).strip()
    return "" if text == "N/A" else text


class MovieRecord(BaseModel):
    """Movie details handed from the fetcher to the formatter."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    year: Union[str, int] = ""
    imdb_rating: str = Field(default="", alias="imdbRating")
    cast: List[str] = Field(default_factory=list)
    genre: str = ""
    director: str = ""
    plot: str = ""
    runtime: str = ""
    rated: str = ""

    @field_validator("cast")
    @classmethod
    def _top_billed(cls, value: List[str]) -> List[str]:
        return [name for name in value if name][:MAX_CAST]

    @classmethod
    def from_omdb(cls, payload: Dict[str, Any]) -> "MovieRecord":
        """Build a record from an OMDb ``?t=`` response body."""
        actors = _clean(payload.get("Actors"))
        return cls(
            title=_clean(payload.get("Title")),
            year=_clean(payload.get("Year")),
            imdb_rating=_clean(payload.get("imdbRating")),
            cast=[name.strip() for name in actors.split(",")] if actors else [],
            genre=_clean(payload.get("Genre")),
            director=_clean(payload.get("Director")),
            plot=_clean(payload.get("Plot")),
            runtime=_clean(payload.get("Runtime")),
            rated=_clean(payload.get("Rated")),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class SummaryDocument(BaseModel):
    """A rendered summary and the name it should be saved under."""

    filename: str = Field(
        description="Suggested file name based on the movie title, e.g. 'Dangal_summary.txt'"
    )
    content: str = Field(
        description="The complete decorated movie summary, ready to be written to a text file"
    )
