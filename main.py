import logging
import socket
import sys

import uvicorn

import config
from db.database import Database
from db.location import StorageConfig
from server.app import create_app

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("dzherelo")


def _port_is_free(port: int) -> bool:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((config.HOST, port))
    except OSError:
        return False
    finally:
        sock.close()
    return True


def find_available_port(start: int, end: int) -> int:
    port = next((p for p in range(start, end + 1) if _port_is_free(p)), None)
    if port is None:
        raise RuntimeError(f"Puertos {start}-{end} ocupados")
    return port


def main():
    try:
        port = find_available_port(config.PORT, config.PORT_RANGE_END)
    except RuntimeError as e:
        logger.error(str(e))
        sys.exit(1)

    if port != config.PORT:
        logger.info("Puerto %d en uso, usando %d", config.PORT, port)

    db = Database(StorageConfig())
    app = create_app(db)

    logger.info("%s iniciado en http://%s:%d", config.APP_NAME, config.HOST, port)
    uvicorn.run(app, host=config.HOST, port=port, log_level="warning")


if __name__ == "__main__":
    main()
