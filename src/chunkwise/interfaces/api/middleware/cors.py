"""CORS middleware - echoes allowed origins and answers preflight."""

import falcon.asgi

_ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


class CORSMiddleware:
    """Adds CORS headers for configured origins; no origins means CORS is off."""

    def __init__(self, origins: list[str]) -> None:
        self._origins = set(origins)

    def _apply(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if not origin or origin not in self._origins:
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", _ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", "Authorization, Content-Type")
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS" and self._origins:
            self._apply(req, resp)
            resp.status = falcon.HTTP_200
            resp.media = {}
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._apply(req, resp)
