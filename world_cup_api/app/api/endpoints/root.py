"""
Root endpoint used as a liveness probe.

Every request that no other route handles, whatever its method or
path, ends up here and is answered with 204 and an empty body.  The
exception is a path that another route serves under different
methods (e.g. ``PUT /winners``): that gets an empty 405 with an
``Allow`` header listing the methods the route does accept.

The catch‑all is a plain Starlette ``Route`` around an ASGI endpoint,
which leaves it without a method restriction.  ``register_root_handler``
must run after every other router has been included.
"""

from fastapi import FastAPI, Response, status
from starlette.routing import Match, Route
from starlette.types import Receive, Scope, Send


class RootHandler:
    """ASGI endpoint answering 204, or 405 for a known path."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = Response(status_code=status.HTTP_204_NO_CONTENT)
        for route in scope["app"].router.routes:
            match, _ = route.matches(scope)
            if match == Match.PARTIAL and getattr(route, "methods", None):
                response = Response(
                    status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
                    headers={"Allow": ", ".join(sorted(route.methods))},
                )
                break
        await response(scope, receive, send)


def register_root_handler(app: FastAPI) -> None:
    """Append the catch‑all route to ``app``."""
    app.router.routes.append(
        Route("/{path:path}", endpoint=RootHandler(), include_in_schema=False)
    )
