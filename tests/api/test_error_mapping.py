"""Tests for the CampusError -> HTTP translation."""

from __future__ import annotations

import asyncio
import json

import pytest
from starlette.requests import Request

from campus.api.errors import campus_error_handler, status_for
from campus.services import errors


def _request() -> Request:
    return Request({"type": "http", "method": "POST", "path": "/v1/x", "headers": []})


@pytest.mark.parametrize(
    "exc, expected",
    [
        (errors.NotFoundError("missing"), 404),
        (errors.AlreadyExistsError("dup"), 409),
        (errors.UnauthorizedError("nope"), 403),
        (errors.ValidationError("bad"), 422),
        (errors.CampusError("other"), 400),
    ],
)
def test_status_for_each_kind(exc: errors.CampusError, expected: int) -> None:
    assert status_for(exc) == expected


def test_handler_renders_detail_and_kind() -> None:
    resp = asyncio.run(campus_error_handler(_request(), errors.AlreadyExistsError("dup")))
    assert resp.status_code == 409
    assert json.loads(resp.body) == {"detail": "dup", "kind": "already_exists"}
