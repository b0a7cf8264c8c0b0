"""Prometheus scrape endpoint.

Returns plain text in Prometheus exposition format, e.g.:

  # HELP campus_certificates_issued_total Certificates issued
  # TYPE campus_certificates_issued_total counter
  campus_certificates_issued_total 3.0
  campus_quiz_attempts_total{result="passed"} 11.0

Left open for scraping; restrict it at the network edge in production.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["observability"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
