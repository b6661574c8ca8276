from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from greenlight.api.deps import read_id_param
from greenlight.core.errors import FailedValidationError
from greenlight.core.jsonio import read_json, write_json
from greenlight.core.validator import Validator
from greenlight.models.envelope import MovieEnvelope
from greenlight.models.movie import Movie, MovieInput, validate_movie
from greenlight.models.runtime import Runtime

router = APIRouter(prefix="/v1", tags=["movies"])


@router.post("/movies")
async def create_movie(request: Request) -> Response:
    payload = read_json(await request.body(), MovieInput)

    movie = payload.to_movie()
    v = Validator()
    validate_movie(v, movie)
    if not v.valid:
        raise FailedValidationError(v.errors)

    # nothing is stored yet, so the accepted input is echoed back
    return write_json(200, MovieEnvelope(movie=payload))


@router.get("/movies/{id}")
async def show_movie(movie_id: int = Depends(read_id_param)) -> Response:
    # placeholder record until movies are persisted
    movie = Movie(
        id=movie_id,
        created_at=datetime.now(timezone.utc),
        title="Casablanca",
        runtime=Runtime(102),
        genres=["drama", "romance", "war"],
        version=1,
    )
    return write_json(200, MovieEnvelope(movie=movie))
