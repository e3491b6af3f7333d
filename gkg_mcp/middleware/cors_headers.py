"""CORS headers middleware.

Adds permissive CORS headers to every HTTP response and answers preflight
requests directly, using the pure ASGI pattern.
"""

from collections.abc import Sequence


class CORSHeadersMiddleware:
    """
    Attach CORS headers to all responses.

    Unlike Starlette's CORSMiddleware, headers are sent whether or not the
    request carries an Origin header. Any OPTIONS request short-circuits
    with 204 No Content.
    """

    def __init__(
        self,
        app,
        allow_origin: str = "*",
        allow_methods: Sequence[str] = ("POST", "OPTIONS"),
        allow_headers: Sequence[str] = ("Content-Type", "Authorization"),
    ):
        self.app = app
        self.headers = [
            (b"access-control-allow-origin", allow_origin.encode()),
            (b"access-control-allow-methods", ", ".join(allow_methods).encode()),
            (b"access-control-allow-headers", ", ".join(allow_headers).encode()),
        ]

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if scope["method"] == "OPTIONS":
            await send({"type": "http.response.start", "status": 204, "headers": self.headers})
            await send({"type": "http.response.body", "body": b""})
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.extend(self.headers)
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, send_with_headers)
