from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator

from greenlight.core.validator import Validator, unique
from greenlight.models.runtime import INT32_MAX, INT32_MIN, Runtime

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]

# release years must be strictly after this
MIN_YEAR = 1888
MAX_TITLE_BYTES = 500
MAX_GENRES = 5


class Movie(BaseModel):
    id: int = Field(default=0, ge=0, le=2**63 - 1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), exclude=True)
    title: str = ""
    year: Int32 = 0
    runtime: Runtime = Runtime(0)
    genres: list[str] | None = None
    # starts at 1 and is bumped on every update
    version: Int32 = 1

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in ("year", "runtime", "genres"):
            if not getattr(self, key):
                data.pop(key, None)
        return data


class MovieInput(BaseModel):
    """Body of ``POST /v1/movies``.

    Absent keys and keys set to null keep their zero value, unknown keys are
    ignored. Values are never coerced between JSON types, so ``"year": "1999"``
    is a type error.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str = ""
    year: Int32 = 0
    runtime: Runtime = Runtime(0)
    genres: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_movie(self) -> Movie:
        return Movie(title=self.title, year=self.year, runtime=self.runtime, genres=self.genres)


def validate_movie(v: Validator, movie: Movie) -> None:
    v.check(movie.title != "", "title", "must be provided")
    v.check(
        len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES,
        "title",
        f"must not be more than {MAX_TITLE_BYTES} bytes long",
    )

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year > MIN_YEAR, "year", f"must be greater than {MIN_YEAR}")
    v.check(movie.year <= datetime.now().year, "year", "must not be in the future")

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")

    v.check(movie.genres is not None, "genres", "must be provided")
    genres = movie.genres or []
    v.check(len(genres) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(genres) <= MAX_GENRES, "genres", f"must not contain more than {MAX_GENRES} genres")
    v.check(unique(genres), "genres", "must not contain duplicate values")
