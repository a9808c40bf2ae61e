# backend/collab/cors.py
"""
CORSMiddleware that answers 403 when a request breaks the policy.

Starlette's CORSMiddleware returns 400 on a bad preflight and lets a simple
request from an unknown origin through without CORS headers. Here both are
refused with 403 Forbidden.
"""
from __future__ import annotations

import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from .errors import CorsRejected, status_for

logger = logging.getLogger(__name__)


class StrictCORSMiddleware(CORSMiddleware):
    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code == 400:
            # body reads e.g. "Disallowed CORS origin, method"
            reason = response.body.decode("utf-8", errors="replace")
            logger.warning(
                "preflight rejected origin=%s: %s", request_headers.get("origin"), reason
            )
            return _forbidden(CorsRejected(reason))
        return response

    async def simple_response(
        self, scope: Scope, receive: Receive, send: Send, request_headers: Headers
    ) -> None:
        origin = request_headers.get("origin")
        if origin is not None and not self.is_allowed_origin(origin=origin):
            logger.warning("request rejected, origin not allowed: %s", origin)
            await _forbidden(CorsRejected())(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers)


def _forbidden(exc: CorsRejected) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status_for(exc))
