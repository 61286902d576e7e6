import logging
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import models, schemas
from errors import DatabaseError

logger = logging.getLogger(__name__)


def get_email_accounts(db: Session) -> List[models.EmailAccount]:
    try:
        return list(db.scalars(select(models.EmailAccount)).all())
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError.from_sqlalchemy(e, "select") from e


def create_email_account(db: Session, account: schemas.EmailAccountCreate) -> schemas.EmailAccountResponse:
    values = {
        "conta": account.conta,
        "empresa_id": account.empresa_id,
        "tipo_conta": account.tipo_conta,
    }
    # Leave crd_id out entirely so the column keeps its database default
    if account.crd_id is not None:
        values["crd_id"] = account.crd_id

    stmt = insert(models.EmailAccount).values(**values).returning(models.EmailAccount.id)
    try:
        new_id = db.execute(stmt).scalar_one()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError.from_sqlalchemy(e, "insert") from e

    logger.debug(f"[DB] Inserted email account id={new_id}, with_credential={'crd_id' in values}")
    return schemas.EmailAccountResponse(id=new_id, **account.model_dump(exclude={"id"}))


def delete_email_account(db: Session, account_id: int) -> int:
    """Delete by primary key; returns the matched row count, zero is not an error."""
    stmt = delete(models.EmailAccount).where(models.EmailAccount.id == account_id)
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError.from_sqlalchemy(e, "delete") from e

    logger.debug(f"[DB] Deleted email account id={account_id}, rows={result.rowcount}")
    return result.rowcount
