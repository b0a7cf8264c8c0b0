"""Health and readiness endpoints.

  /health (liveness):
    "Is this process alive and not deadlocked?"  Answering at all proves
    the process is up; acquiring the store lock proves no operation is
    wedged holding it.  Row counts are included for a quick look at what
    the instance is carrying.

  /ready (readiness):
    "Can this instance handle traffic right now?"  The store lives in
    process memory, so once the app object exists there is nothing left
    to wait for.
"""

from __future__ import annotations

from fastapi import APIRouter, Response

from campus.api.dependencies import Store

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: Store) -> dict:
    return {
        "status": "ok",
        "checks": {"store": "ok"},
        "counts": store.counts(),
    }


@router.get("/ready")
async def ready() -> Response:
    return Response(status_code=200)
