"""uvicorn server wrapper that reports the listening URL once bound."""

import logging

import uvicorn

from app.config import settings

logger = logging.getLogger(__name__)


class Server(uvicorn.Server):
    """uvicorn server that prints a confirmation line after binding."""

    @property
    def bound_port(self) -> int | None:
        """Port the listener is bound to, or None before startup."""
        servers = getattr(self, "servers", None)
        if not servers or not servers[0].sockets:
            return None
        return servers[0].sockets[0].getsockname()[1]

    async def startup(self, sockets=None) -> None:
        # Exits the process non-zero if the bind is refused
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Listening on {self.config.host}:{self.bound_port}")
            print(f"✅ Server running at http://localhost:{self.bound_port}", flush=True)


def create_server(port: int, host: str | None = None) -> Server:
    """Build a server for app.main:app without starting it."""
    if not 0 <= port <= 65535:
        raise ValueError(f"Invalid TCP port: {port}")
    config = uvicorn.Config(
        "app.main:app",
        host=host or settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


def start(port: int, host: str | None = None) -> None:
    """Bind the listener and serve until the process is terminated."""
    create_server(port, host=host).run()
