from fastapi import APIRouter, Depends
from starlette.responses import Response

from greenlight.api.deps import get_container
from greenlight.core.container import AppContainer
from greenlight.core.jsonio import write_json
from greenlight.models.envelope import HealthEnvelope, SystemInfo

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/healthcheck")
async def healthcheck(container: AppContainer = Depends(get_container)) -> Response:
    envelope = HealthEnvelope(
        status="available",
        system_info=SystemInfo(environment=container.settings.environment, version=container.version),
    )
    return write_json(200, envelope)
