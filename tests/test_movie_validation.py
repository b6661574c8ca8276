from datetime import datetime

from greenlight.core.validator import Validator
from greenlight.models.movie import Movie, validate_movie
from greenlight.models.runtime import Runtime


def _movie(**overrides) -> Movie:
    fields = {
        "title": "Black Panther",
        "year": 2018,
        "runtime": Runtime(134),
        "genres": ["action", "adventure"],
    }
    fields.update(overrides)
    return Movie(**fields)


def _errors(movie: Movie) -> dict[str, str]:
    v = Validator()
    validate_movie(v, movie)
    return v.errors


def test_valid_movie_has_no_errors() -> None:
    assert _errors(_movie()) == {}


def test_zero_values_are_reported_as_missing() -> None:
    errors = _errors(Movie())

    assert errors == {
        "title": "must be provided",
        "year": "must be provided",
        "runtime": "must be provided",
        "genres": "must be provided",
    }


def test_title_length_is_counted_in_bytes() -> None:
    assert _errors(_movie(title="a" * 500)) == {}
    assert _errors(_movie(title="é" * 251)) == {"title": "must not be more than 500 bytes long"}


def test_year_bounds() -> None:
    assert _errors(_movie(year=1889)) == {}
    assert _errors(_movie(year=1888)) == {"year": "must be greater than 1888"}
    assert _errors(_movie(year=1800)) == {"year": "must be greater than 1888"}
    assert _errors(_movie(year=datetime.now().year + 1)) == {"year": "must not be in the future"}


def test_runtime_must_be_positive() -> None:
    assert _errors(_movie(runtime=Runtime(-10))) == {"runtime": "must be a positive integer"}


def test_genre_rules() -> None:
    assert _errors(_movie(genres=[])) == {"genres": "must contain at least 1 genre"}
    assert _errors(_movie(genres=["a", "b", "c", "d", "e", "f"])) == {
        "genres": "must not contain more than 5 genres"
    }
    assert _errors(_movie(genres=["drama", "drama"])) == {"genres": "must not contain duplicate values"}


def test_movie_json_omits_empty_fields_and_creation_time() -> None:
    assert Movie(id=3, title="Untitled").model_dump(mode="json") == {"id": 3, "title": "Untitled", "version": 1}
