"""
Programmatic uvicorn runner for the greeter service.

Owns the single TCP listener: NOT_LISTENING until the socket is bound,
LISTENING from then until the process exits.
"""
import enum
import logging
from typing import List, Optional

import uvicorn

from .config import Settings, get_settings
from .exceptions import ListenerBindError

logger = logging.getLogger(__name__)


class ListenerState(enum.Enum):
    NOT_LISTENING = "not_listening"
    LISTENING = "listening"


class GreeterServer(uvicorn.Server):
    """uvicorn.Server that reports once its listener is bound."""

    def __init__(self, config: uvicorn.Config):
        super().__init__(config)
        self.state = ListenerState.NOT_LISTENING
        self.bind_error: Optional[OSError] = None

    async def startup(self, sockets: Optional[List] = None) -> None:
        try:
            await super().startup(sockets=sockets)
        except SystemExit as exc:
            # uvicorn calls sys.exit() from inside its "except OSError" bind handler
            if isinstance(exc.__context__, OSError):
                self.bind_error = exc.__context__
            raise
        if not self.started:
            return
        message = f"Hello CRM listening on {', '.join(self.bound_addresses()) or '(unknown)'}"
        # Ready signal goes to stdout whatever the log level
        print(message, flush=True)
        logger.info(message)
        self.state = ListenerState.LISTENING

    def _bound_names(self) -> List[tuple]:
        names = []
        for server in getattr(self, "servers", []):
            for sock in server.sockets or ():
                name = sock.getsockname()
                # AF_UNIX sockets report a path, not a (host, port) pair
                if isinstance(name, tuple):
                    names.append(name)
        return names

    def bound_addresses(self) -> List[str]:
        """host:port pairs actually bound (resolves port 0 to the real port)."""
        return [f"{name[0]}:{name[1]}" for name in self._bound_names()]

    @property
    def bound_port(self) -> Optional[int]:
        names = self._bound_names()
        return names[0][1] if names else None


def build_config(settings: Settings) -> uvicorn.Config:
    return uvicorn.Config(
        app="hello_crm.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        lifespan="on",
    )


def create_server(settings: Optional[Settings] = None) -> GreeterServer:
    settings = settings or get_settings()
    return GreeterServer(build_config(settings))


def run(settings: Optional[Settings] = None) -> None:
    """
    Bind the listener and serve until terminated.

    uvicorn logs the OSError and exits when the socket cannot be bound;
    that exit is re-raised here as ListenerBindError. Any other startup
    exit (e.g. the app failing to import) propagates unchanged. There is
    no retry.
    """
    settings = settings or get_settings()
    server = create_server(settings)
    logger.debug(f"Starting uvicorn with {settings!r}")
    try:
        server.run()
    except SystemExit:
        if server.bind_error is not None:
            raise ListenerBindError(settings.host, settings.port, str(server.bind_error)) from server.bind_error
        raise
