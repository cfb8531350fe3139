import logging

from fastapi import APIRouter, HTTPException

import config
from db.database import Database
from db.errors import StoreError
from db.models import Person, PersonDraft

logger = logging.getLogger(__name__)


def create_router(db: Database) -> APIRouter:
    router = APIRouter()

    # -- Status --

    @router.get("/status")
    def get_status():
        try:
            db_path = db.db_path
        except StoreError as e:
            logger.error("Error resolviendo la base de datos: %s", e)
            raise HTTPException(500, str(e))
        return {"app": config.APP_NAME, "db_path": str(db_path)}

    # -- Registros --

    @router.get("/people", response_model=list[Person])
    def list_people():
        try:
            return db.list_people()
        except StoreError as e:
            logger.error("Error listando registros: %s", e)
            raise HTTPException(500, str(e))

    @router.post("/people", response_model=Person, status_code=201)
    def create_person(body: PersonDraft):
        try:
            return db.create_person(body)
        except StoreError as e:
            logger.error("Error creando registro: %s", e)
            raise HTTPException(500, str(e))

    return router
