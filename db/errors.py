from enum import Enum


class ErrorKind(Enum):
    LOCATION = "location"
    CONNECTION = "connection"
    SCHEMA = "schema"
    QUERY = "query"


class StoreError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LocationError(StoreError):
    kind = ErrorKind.LOCATION


class DatabaseConnectionError(StoreError):
    kind = ErrorKind.CONNECTION


class SchemaError(StoreError):
    kind = ErrorKind.SCHEMA


class QueryError(StoreError):
    kind = ErrorKind.QUERY
