import os

from dotenv import load_dotenv

load_dotenv()

# Aplicacion
APP_NAME = "Dzherelo"
APP_IDENTIFIER = "dzherelo"

# Base de datos (nombre fijo dentro del directorio de datos de la aplicacion)
DB_FILENAME = "dzherelo.sqlite3"

# Servidor
HOST = os.getenv("DZHERELO_HOST", "127.0.0.1")
PORT = int(os.getenv("DZHERELO_PORT", "8787"))
PORT_RANGE_END = PORT + 13

# Logging
LOG_LEVEL = os.getenv("DZHERELO_LOG_LEVEL", "INFO").upper()
