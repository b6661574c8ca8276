from pydantic import BaseModel

from greenlight.models.movie import Movie, MovieInput


class MovieEnvelope(BaseModel):
    movie: Movie | MovieInput


class ErrorEnvelope(BaseModel):
    error: str | dict[str, str]


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthEnvelope(BaseModel):
    status: str = "available"
    system_info: SystemInfo


# every response body the API writes is one of these
Envelope = MovieEnvelope | ErrorEnvelope | HealthEnvelope
