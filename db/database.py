import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from pydantic import ValidationError

from db.errors import DatabaseConnectionError, QueryError, SchemaError
from db.location import StorageConfig, resolve_db_path
from db.models import PERSON_COLUMNS, PERSON_FIELDS, SCHEMA_SQL, Person, PersonDraft

logger = logging.getLogger(__name__)

_SELECT_PERSONS = f"SELECT {', '.join(PERSON_COLUMNS)} FROM persons"
_INSERT_PERSON = (
    f"INSERT INTO persons ({', '.join(PERSON_FIELDS)}) "
    f"VALUES ({', '.join('?' for _ in PERSON_FIELDS)})"
)

_BUSY_CODES = (sqlite3.SQLITE_BUSY, sqlite3.SQLITE_LOCKED)


def _is_busy(e: sqlite3.Error) -> bool:
    return ((e.sqlite_errorcode or 0) & 0xFF) in _BUSY_CODES


class Database:
    # Sin conexion persistente: cada operacion abre, prepara el esquema y cierra
    def __init__(self, storage: StorageConfig, timeout: float = 5.0):
        self.storage = storage
        self.timeout = timeout

    @property
    def db_path(self):
        return resolve_db_path(self.storage)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        path = resolve_db_path(self.storage)
        try:
            conn = sqlite3.connect(str(path), timeout=self.timeout)
        except sqlite3.Error as e:
            raise DatabaseConnectionError(f"No se pudo abrir la base de datos {path}: {e}") from e
        try:
            conn.row_factory = sqlite3.Row
            self._init_schema(conn)
            yield conn
        finally:
            # Cerrar sin commit descarta la transaccion abierta
            conn.close()

    def _init_schema(self, conn: sqlite3.Connection):
        try:
            conn.executescript(SCHEMA_SQL)
            conn.commit()
        except sqlite3.Error as e:
            if _is_busy(e):
                raise QueryError(f"Base de datos ocupada por otro proceso: {e}") from e
            raise SchemaError(f"No se pudo crear el esquema: {e}") from e

    @staticmethod
    def _row_to_person(row: sqlite3.Row) -> Person:
        try:
            return Person(**{name: row[name] for name in PERSON_COLUMNS})
        except ValidationError as e:
            raise QueryError(f"Registro {row['id']} invalido: {e}") from e

    def list_people(self) -> list[Person]:
        with self._connect() as conn:
            try:
                rows = conn.execute(f"{_SELECT_PERSONS} ORDER BY id DESC").fetchall()
            except sqlite3.Error as e:
                raise QueryError(f"No se pudieron leer los registros: {e}") from e
            return [self._row_to_person(row) for row in rows]

    def create_person(self, draft: PersonDraft) -> Person:
        with self._connect() as conn:
            try:
                cursor = conn.execute(_INSERT_PERSON, draft.field_values())
                row = conn.execute(f"{_SELECT_PERSONS} WHERE id = ?", (cursor.lastrowid,)).fetchone()
            except sqlite3.Error as e:
                raise QueryError(f"No se pudo guardar el registro: {e}") from e
            if row is None:
                raise QueryError(f"Registro {cursor.lastrowid} no encontrado tras insertar")
            person = self._row_to_person(row)
            try:
                conn.commit()
            except sqlite3.Error as e:
                raise QueryError(f"No se pudo guardar el registro: {e}") from e

        logger.info("Registro creado: id=%d", person.id)
        return person
