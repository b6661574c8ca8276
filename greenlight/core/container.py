import logging

from greenlight.core.settings import VERSION, Settings


class AppContainer:
    """Everything a handler or helper may depend on, built once per application."""

    def __init__(self, settings: Settings, logger: logging.Logger | None = None):
        self.settings = settings
        self.version = VERSION
        self.logger = logger or logging.getLogger("greenlight")

        self.logger.info(
            "App container initialized",
            extra={
                "environment": settings.environment,
                "version": self.version,
                "port": settings.port,
            },
        )
