import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import models, schemas, crud, config
from database import Database, get_db
from errors import DatabaseUnavailable, register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(settings: config.Settings):
    logging.basicConfig(
        level=settings.effective_log_level,
        format=settings.log_format
    )


async def read_account_body(request: Request) -> schemas.EmailAccountCreate:
    return schemas.parse_account_body(await request.body())


def create_app(settings: config.Settings, database: Optional[Database] = None) -> FastAPI:
    """Build the service around one shared database handle.

    The connectivity check runs here, so a database that cannot be reached
    raises DatabaseUnavailable before any route is served.
    """
    if database is None:
        database = Database(settings.sqlalchemy_url())
    database.ping()
    database.create_tables(models.Base.metadata)

    app = FastAPI(title="Email Record Service", debug=settings.debug)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/emails", response_model=List[schemas.EmailAccountResponse])
    def list_emails(db: Session = Depends(get_db)):
        accounts = crud.get_email_accounts(db)
        logger.debug(f"[API] Listed {len(accounts)} email accounts")
        return accounts

    @app.post("/emails", response_model=schemas.EmailAccountResponse, status_code=status.HTTP_201_CREATED)
    def create_email(account: schemas.EmailAccountCreate = Depends(read_account_body), db: Session = Depends(get_db)):
        created = crud.create_email_account(db, account=account)
        logger.info(f"[API] Created email account id={created.id}, empresa_id={created.empresa_id}")
        return created

    @app.delete("/emails/{account_id}", response_model=schemas.MessageResponse)
    def delete_email(account_id: str, db: Session = Depends(get_db)):
        account_id = schemas.parse_account_id(account_id)
        # Missing rows still count as deleted
        removed = crud.delete_email_account(db, account_id=account_id)
        logger.info(f"[API] Delete email account id={account_id}, removed={removed}")
        return {"message": "Email deleted"}

    return app


def run():
    settings = config.load_settings()
    configure_logging(settings)

    try:
        app = create_app(settings)
    except DatabaseUnavailable as e:
        logger.critical(f"Error connecting to database: {e}")
        sys.exit(1)

    logger.info(f"Starting server on port {settings.port}...")
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.effective_log_level.lower(),
        access_log=settings.mode != config.TEST_MODE,
    )


if __name__ == "__main__":
    run()
