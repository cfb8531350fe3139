from fastapi import FastAPI

import config
from db.database import Database
from server.routes import create_router


def create_app(db: Database) -> FastAPI:
    app = FastAPI(title=config.APP_NAME, version="0.1.0")

    router = create_router(db)
    app.include_router(router, prefix="/api")

    return app
