"""
Database service functions for worker records.

Every mutating function commits its own transaction and returns the
resulting row state. On a store failure the session is rolled back and the
SQLAlchemyError is re-raised for the caller to report.
"""

import logging
import uuid
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.worker import Worker

logger = logging.getLogger(__name__)


def list_workers(db: Session) -> list[Worker]:
    """Return every worker record (no ordering guarantee beyond creation time)."""
    return db.query(Worker).order_by(Worker.created_at).all()


def get_worker_by_id(db: Session, worker_id: uuid.UUID) -> Optional[Worker]:
    """
    Get worker by its identity key.

    Args:
        db: Database session
        worker_id: Worker's UUID

    Returns:
        Worker object if found, None otherwise
    """
    return db.query(Worker).filter(Worker.id == worker_id).first()


def create_worker(db: Session, fields: dict[str, Any]) -> Worker:
    """
    Create a new worker record.

    Args:
        db: Database session
        fields: Column values keyed by attribute name (any subset)

    Returns:
        Created Worker object with its assigned id

    Raises:
        SQLAlchemyError: If the insert fails (session is rolled back)
    """
    worker = Worker(**fields)

    try:
        db.add(worker)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(worker)
    return worker


def create_workers(db: Session, items: list[dict[str, Any]]) -> list[Worker]:
    """
    Create several worker records in one transaction.

    All-or-nothing: if the insert fails, nothing from the batch is kept.

    Args:
        db: Database session
        items: One dict of column values per worker, in request order

    Returns:
        Created Worker objects, same order as items

    Raises:
        SQLAlchemyError: If any insert fails (whole batch rolled back)
    """
    if not items:
        return []

    workers = [Worker(**fields) for fields in items]

    try:
        db.add_all(workers)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    for worker in workers:
        db.refresh(worker)

    logger.info(f"Inserted batch of {len(workers)} workers")

    return workers


def update_worker(
    db: Session,
    worker_id: uuid.UUID,
    fields: dict[str, Any],
) -> Optional[Worker]:
    """
    Merge the given fields into an existing worker.

    The identity key is never touched, even if present in fields.

    Args:
        db: Database session
        worker_id: Worker's UUID
        fields: Column values to overwrite, keyed by attribute name

    Returns:
        Updated Worker object if found, None otherwise

    Raises:
        SQLAlchemyError: If the update fails (session is rolled back)
    """
    worker = get_worker_by_id(db, worker_id)
    if not worker:
        return None

    for field, value in fields.items():
        if field == "id":
            continue
        setattr(worker, field, value)

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(worker)
    return worker


def update_worker_rm_paid(
    db: Session,
    worker_id: uuid.UUID,
    rm_paid: float,
) -> Optional[Worker]:
    """Set only the paid amount; all other fields stay as they are."""
    return update_worker(db, worker_id, {"rm_paid": rm_paid})


def delete_worker(db: Session, worker_id: uuid.UUID) -> Optional[Worker]:
    """
    Delete a worker by id.

    Returns:
        The deleted Worker (detached, attributes still loaded) if found,
        None otherwise
    """
    worker = get_worker_by_id(db, worker_id)
    if not worker:
        return None

    try:
        db.delete(worker)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    return worker


def delete_all_workers(db: Session) -> int:
    """
    Delete every worker record unconditionally.

    Returns:
        Number of rows deleted
    """
    try:
        deleted = db.query(Worker).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Deleted all workers ({deleted} rows)")

    return deleted
