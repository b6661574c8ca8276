import re

from fastapi import Request

from greenlight.core.container import AppContainer
from greenlight.core.errors import NotFoundError

_ID_RE = re.compile(r"[+-]?[0-9]+")


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def read_id_param(request: Request) -> int:
    """Return the ``id`` path parameter; anything but a positive int64 is a 404."""
    raw = request.path_params.get("id", "")
    if not _ID_RE.fullmatch(raw):
        raise NotFoundError()
    movie_id = int(raw)
    if not 1 <= movie_id <= 2**63 - 1:
        raise NotFoundError()
    return movie_id
