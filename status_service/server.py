"""
Process entry: bind the listening socket and serve the app with uvicorn.
A socket that cannot be bound is fatal.
"""
import socket
import sys

import uvicorn

from .config import get_app_config
from .logging_config import get_logger
from .main import app

logger = get_logger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on host:port, exiting the process with status 1 on failure."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except OSError as e:
        sock.close()
        logger.error(f"Failed to bind {host}:{port}: {e}")
        sys.exit(1)
    sock.set_inheritable(True)
    return sock


def main() -> None:
    config = get_app_config()
    sock = bind_socket(config.host, config.port)

    logger.info(f"Server starting on :{config.port}...")
    server = uvicorn.Server(uvicorn.Config(app, log_config=None))
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
