"""
API routes for the worker roster.

Endpoints:
- GET    /workers                         List all workers
- POST   /workers                         Create several workers (all-or-nothing)
- DELETE /workers                         Delete every worker
- GET    /worker/{worker_id}              Get single worker
- POST   /worker                          Create one worker
- PUT    /worker/{worker_id}              Update any subset of fields
- PUT    /worker/{worker_id}/updateRMPaid Update only RMPaid
- DELETE /worker/{worker_id}              Delete one worker

Errors are returned as {"message": "..."}:
- 400 when the body or id fails validation, or the store rejects the write
- 404 "Worker not found" when the id matches no record

Interactive API docs:
- Swagger UI: http://localhost:3000/api-docs
"""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from api.worker_schemas import (
    MessageResponse,
    RMPaidUpdate,
    WorkerCreate,
    WorkerResponse,
    WorkerUpdate,
)
from db.session import get_db
from db.worker_service import (
    create_worker,
    create_workers,
    delete_all_workers,
    delete_worker,
    get_worker_by_id,
    list_workers,
    update_worker,
    update_worker_rm_paid,
)

logger = logging.getLogger(__name__)

router = APIRouter()

WORKER_NOT_FOUND = "Worker not found"

# Error bodies shared by the OpenAPI description of each route
ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "Bad request"},
}
NOT_FOUND_RESPONSES = {
    **ERROR_RESPONSES,
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": WORKER_NOT_FOUND},
}


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=WORKER_NOT_FOUND
    )


# =============================================================================
# Collection routes
# =============================================================================

@router.get(
    "/workers",
    response_model=list[WorkerResponse],
    response_model_exclude_none=True,
    summary="Get all workers",
)
def get_workers(db: Session = Depends(get_db)):
    """Get all workers. Returns an empty list when there are none."""
    workers = list_workers(db)

    logger.info(f"GET /workers -> {len(workers)} workers")

    return workers


@router.post(
    "/workers",
    response_model=list[WorkerResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create multiple new workers",
)
def post_workers(
    request: list[WorkerCreate],
    db: Session = Depends(get_db),
):
    """
    Create several workers in one call.

    The whole array is validated before anything is written, and the insert
    runs in a single transaction: either every worker is created or none is.

    Example:
        POST /workers
        [{"name": "Ana", "RMPaid": 100}, {"name": "Budi", "status": "active"}]

        Response (201):
        [{"_id": "...", "name": "Ana", "RMPaid": 100.0, ...}, {...}]
    """
    workers = create_workers(
        db,
        [item.model_dump(exclude_unset=True) for item in request]
    )

    logger.info(f"POST /workers -> created {len(workers)} workers")

    return workers


@router.delete("/workers", response_model=MessageResponse, summary="Delete all workers")
def delete_workers(db: Session = Depends(get_db)):
    """Delete every worker record unconditionally."""
    deleted = delete_all_workers(db)

    logger.info(f"DELETE /workers -> {deleted} workers removed")

    return MessageResponse(message="All workers deleted")


# =============================================================================
# Single-record routes
# =============================================================================

@router.get(
    "/worker/{worker_id}",
    response_model=WorkerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
    summary="Get a worker by id",
)
def get_worker(worker_id: uuid.UUID, db: Session = Depends(get_db)):
    """Get a single worker by id."""
    worker = get_worker_by_id(db, worker_id)

    if not worker:
        logger.info(f"GET /worker/{worker_id} -> not found")
        raise _not_found()

    logger.info(f"GET /worker/{worker_id}")

    return worker


@router.post(
    "/worker",
    response_model=WorkerResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create a new worker",
)
def post_worker(request: WorkerCreate, db: Session = Depends(get_db)):
    """
    Create a new worker. Every field is optional; the id is assigned here.

    Example:
        POST /worker
        {"name": "Ana", "RMPaid": 100}

        Response (201):
        {"_id": "3f0c...", "name": "Ana", "RMPaid": 100.0, ...}
    """
    worker = create_worker(db, request.model_dump(exclude_unset=True))

    logger.info(f"POST /worker -> created worker {worker.id}")

    return worker


@router.put(
    "/worker/{worker_id}/updateRMPaid",
    response_model=WorkerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
    summary="Update the RMPaid of a worker",
)
def put_worker_rm_paid(
    worker_id: uuid.UUID,
    request: RMPaidUpdate,
    db: Session = Depends(get_db),
):
    """Set RMPaid only. Returns the worker after the update."""
    worker = update_worker_rm_paid(db, worker_id, request.rm_paid)

    if not worker:
        raise _not_found()

    logger.info(f"PUT /worker/{worker_id}/updateRMPaid -> RMPaid={worker.rm_paid}")

    return worker


@router.put(
    "/worker/{worker_id}",
    response_model=WorkerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
    summary="Update a worker",
)
def put_worker(
    worker_id: uuid.UUID,
    request: WorkerUpdate,
    db: Session = Depends(get_db),
):
    """
    Update any subset of a worker's fields.

    Keys missing from the body are left unchanged; the id cannot be changed.
    Returns the worker after the update.
    """
    worker = update_worker(db, worker_id, request.model_dump(exclude_unset=True))

    if not worker:
        raise _not_found()

    logger.info(f"PUT /worker/{worker_id}")

    return worker


@router.delete(
    "/worker/{worker_id}",
    response_model=WorkerResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
    summary="Delete a worker by id",
)
def delete_worker_by_id(worker_id: uuid.UUID, db: Session = Depends(get_db)):
    """Delete a worker. Returns the record as it was just before deletion."""
    worker = delete_worker(db, worker_id)

    if not worker:
        raise _not_found()

    logger.info(f"DELETE /worker/{worker_id}")

    return worker
