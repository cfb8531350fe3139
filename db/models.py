from pydantic import BaseModel, ConfigDict

PERSON_FIELDS = (
    "last_name",
    "first_name",
    "middle_name",
    "sex",
    "birth_date",
    "birth_place",
    "father",
    "mother",
    "residence",
    "occupation",
    "legitimacy",
    "midwife",
    "godparents",
    "priest",
    "notes",
)

PERSON_COLUMNS = ("id",) + PERSON_FIELDS + ("created_at",)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS persons (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    last_name   TEXT NOT NULL,
    first_name  TEXT NOT NULL,
    middle_name TEXT NOT NULL,
    sex         TEXT NOT NULL,
    birth_date  TEXT NOT NULL,
    birth_place TEXT NOT NULL,
    father      TEXT NOT NULL,
    mother      TEXT NOT NULL,
    residence   TEXT NOT NULL,
    occupation  TEXT NOT NULL,
    legitimacy  TEXT NOT NULL,
    midwife     TEXT NOT NULL,
    godparents  TEXT NOT NULL,
    priest      TEXT NOT NULL,
    notes       TEXT NOT NULL,
    created_at  TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


class PersonDraft(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    last_name: str
    first_name: str
    middle_name: str
    sex: str
    birth_date: str
    birth_place: str
    father: str
    mother: str
    residence: str
    occupation: str
    legitimacy: str  # texto libre, sin enumeracion
    midwife: str
    godparents: str
    priest: str
    notes: str

    def field_values(self) -> tuple:
        return tuple(getattr(self, name) for name in PERSON_FIELDS)


# Registro guardado: id y created_at los asigna la base de datos
class Person(PersonDraft):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    id: int
    created_at: str
