"""
Winners endpoints.

``/winners`` serves ``GET`` (list winners, optionally filtered by the
``year`` query parameter) and ``POST`` (append a new winner).  Any
other method on the path is answered with an empty 405 by the
catch‑all registered in ``root``.  Listing is public; appending
requires the static access token.

A POST is processed strictly in order: token check, body parsing,
store validation and persistence.  The first failing step answers the
request and nothing after it runs.
"""

import logging
import re

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from world_cup_api.app.core.security import ACCESS_TOKEN_HEADER, is_access_token_valid
from world_cup_api.app.core.store import (
    StoreValidationError,
    WinnersStore,
    get_store,
)
from world_cup_api.app.schemas.winner import Winner, Winners

router = APIRouter()

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST"]

JSON_MEDIA_TYPE = "application/json"

# ASCII digits with an optional sign, nothing else.
YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


@router.api_route("/winners", methods=ALLOWED_METHODS)
async def winners_handler(
    request: Request,
    store: WinnersStore = Depends(get_store),
) -> Response:
    """Dispatch ``/winners`` by HTTP method."""
    if request.method == "POST":
        return await add_new_winner(request, store)
    return list_winners(request, store)


def parse_year(value: str):
    """Return ``value`` as an int, or ``None`` if it is not a plain integer."""
    if not YEAR_PATTERN.fullmatch(value):
        return None
    return int(value)


def list_winners(request: Request, store: WinnersStore) -> Response:
    """Return all winners, or those of one year when ``year`` is given.

    A ``year`` that is not an integer yields 400 with an empty body.
    A year without winners yields 200 and an empty list.
    """
    year_param = request.query_params.get("year")
    if year_param is None:
        return Response(content=store.list_all_json(), media_type=JSON_MEDIA_TYPE)
    year = parse_year(year_param)
    if year is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    filtered = Winners(winners=list(store.list_by_year(year)))
    return Response(content=filtered.model_dump_json(), media_type=JSON_MEDIA_TYPE)


async def add_new_winner(request: Request, store: WinnersStore) -> Response:
    """Append the winner in the request body (token protected).

    Returns an empty 401 for a wrong or missing token, 422 for an
    empty or malformed body and for winners the store rejects, 201
    otherwise.
    """
    if not is_access_token_valid(request.headers.get(ACCESS_TOKEN_HEADER)):
        logger.warning("Rejected write to %s: invalid access token", request.url.path)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    body = await request.body()
    if not body.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Request body is empty",
        )
    try:
        winner = Winner.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Rejected malformed winner payload: %s", exc.errors())
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Malformed winner payload",
        )

    # store.add blocks on its lock and on the file rewrite.
    try:
        await run_in_threadpool(store.add, winner)
    except StoreValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
    return Response(status_code=status.HTTP_201_CREATED)
