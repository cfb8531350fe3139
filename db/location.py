import os
import sys
from dataclasses import dataclass
from pathlib import Path

import config
from db.errors import LocationError


@dataclass(frozen=True)
class StorageConfig:
    # None = directorio de datos de la aplicacion de esta instalacion
    data_dir: Path | None = None


def default_app_data_dir() -> Path:
    # Directorio de datos por usuario, como app_data_dir de la aplicacion de escritorio
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            raise LocationError("No se pudo determinar el directorio de datos: APPDATA no definido")
        return Path(appdata) / config.APP_IDENTIFIER

    try:
        home = Path.home()
    except RuntimeError as e:
        raise LocationError(f"No se pudo determinar el directorio de datos: {e}") from e

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / config.APP_IDENTIFIER

    xdg = os.getenv("XDG_DATA_HOME")
    base = Path(xdg) if xdg else home / ".local" / "share"
    return base / config.APP_IDENTIFIER


def resolve_db_path(storage: StorageConfig) -> Path:
    base = storage.data_dir if storage.data_dir is not None else default_app_data_dir()
    try:
        base.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LocationError(f"No se pudo crear el directorio de datos {base}: {e}") from e
    return base.resolve() / config.DB_FILENAME
