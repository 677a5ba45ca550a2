"""
Tests for api/decorators/error_handler.py - exception to HTTP status mapping.
"""

import pytest
from fastapi import HTTPException

from api.decorators import handle_api_errors
from core.exceptions import (
    BadRequestError,
    DatabaseNotInitializedException,
    NotFoundError,
)


pytestmark = pytest.mark.asyncio


class JobGoneError(NotFoundError):
    pass


class PayloadError(BadRequestError):
    pass


def raising(exc: Exception):
    @handle_api_errors
    async def endpoint():
        raise exc

    return endpoint


@pytest.mark.parametrize(
    "exc, status_code",
    [
        (NotFoundError("No job: 1"), 404),
        (JobGoneError("No job: 1"), 404),
        (BadRequestError("no data"), 400),
        (PayloadError("no data"), 400),
    ],
)
async def test_business_errors_mapped_by_class(exc, status_code):
    with pytest.raises(HTTPException) as exc_info:
        await raising(exc)()

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == exc.message


async def test_bad_request_errors_listed_in_detail():
    exc = PayloadError("invalid data", errors=["title: required"])

    with pytest.raises(HTTPException) as exc_info:
        await raising(exc)()

    assert exc_info.value.detail == {
        "message": "invalid data",
        "errors": ["title: required"],
    }


async def test_other_jobly_errors_use_their_status():
    with pytest.raises(HTTPException) as exc_info:
        await raising(DatabaseNotInitializedException("AsyncDatabaseManager"))()

    assert exc_info.value.status_code == 500


async def test_unexpected_errors_hidden():
    with pytest.raises(HTTPException) as exc_info:
        await raising(RuntimeError("secret"))()

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Internal server error"


async def test_return_value_passed_through():
    @handle_api_errors
    async def endpoint():
        return {"ok": True}

    assert await endpoint() == {"ok": True}
