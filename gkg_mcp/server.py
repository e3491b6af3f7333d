"""FastAPI server for the GitLab Knowledge Graph mock MCP endpoint."""

import logging
from contextlib import asynccontextmanager
from html import escape

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import settings
from .mcp import INTERNAL_ERROR, TOOL_NAMES, heartbeat_event_stream, jsonrpc_error, mcp_router
from .middleware import CORSHeadersMiddleware, SecurityHeadersMiddleware
from .models import StatusResponse

logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============


def _filter_sentry_event(event: dict) -> dict:
    """Remove sensitive data from Sentry events."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        if "authorization" in headers:
            headers["authorization"] = "[REDACTED]"
    return event


if settings.sentry_dsn:
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
            integrations=[
                FastApiIntegration(),
                StarletteIntegration(),
            ],
            before_send=lambda event, hint: _filter_sentry_event(event),
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
else:
    logger.debug("Sentry DSN not configured - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"GKG MCP Server v{__version__} listening on port {settings.port}")
    logger.info(f"MCP endpoint: http://localhost:{settings.port}/mcp")
    logger.info(f"SSE endpoint: http://localhost:{settings.port}/mcp/sse")
    yield
    logger.info("GKG MCP Server shutting down")


app = FastAPI(
    title="GKG MCP Server",
    description="Mock MCP endpoint for the GitLab Knowledge Graph tools",
    version=__version__,
    lifespan=lifespan,
)

# CORS headers on every response, preflight answered with 204
app.add_middleware(CORSHeadersMiddleware)

# Security headers middleware (outermost, so preflights get a request id too)
app.add_middleware(SecurityHeadersMiddleware)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (404, 405, ...) as plain text."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking details."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=jsonrpc_error(None, INTERNAL_ERROR, "Internal error"),
    )


# ============ LANDING & HEALTH ENDPOINTS ============

# Landing page and health probe answer regardless of verb (OPTIONS is handled by middleware)
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]

TOOL_SUMMARIES = {
    "list_projects": "Get all projects in knowledge graph",
    "search_codebase_definitions": "Search functions, classes, methods",
    "index_project": "Index/rebuild project knowledge graph",
    "get_references": "Find all references to a definition",
    "read_definitions": "Read multiple definition bodies",
    "get_definition": "Navigate to function/method definition",
    "repo_map": "Generate repository structure map",
}

LANDING_PAGE = """\
<!DOCTYPE html>
<html>
<head>
    <title>GitLab Knowledge Graph - MCP Server</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 40px; background: #f6f8fa; }}
        .container {{ max-width: 800px; margin: 0 auto; background: white; padding: 40px; border-radius: 8px; }}
        h1 {{ color: #fc6d26; }}
        .success {{ background: #e8f5e8; padding: 15px; border-radius: 6px; border-left: 4px solid #28a745; }}
        .tools {{ background: #f8f9fa; padding: 15px; border-radius: 6px; margin: 20px 0; }}
        .endpoint {{ background: #f1f3f4; padding: 10px; border-radius: 4px; font-family: monospace; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>🔍 GitLab Knowledge Graph</h1>
        <div class="success">
            <strong>✅ MCP Server Running</strong><br>
            All official GitLab Knowledge Graph MCP tools are available
        </div>
        <div class="tools">
            <h3>Available MCP Tools:</h3>
            <ul>
{tool_items}
            </ul>
        </div>
        <h3>API Endpoints:</h3>
        <div class="endpoint">MCP JSON-RPC: <strong>/mcp</strong></div>
        <div class="endpoint">SSE stream: <strong>/mcp/sse</strong></div>
        <div class="endpoint">Health Check: <strong>/status</strong></div>
    </div>
</body>
</html>
"""


def render_landing_page() -> str:
    """Render the HTML landing page listing the available tools."""
    tool_items = "\n".join(
        f"                <li><strong>{escape(name)}</strong> - "
        f"{escape(TOOL_SUMMARIES.get(name, ''))}</li>"
        for name in TOOL_NAMES
    )
    return LANDING_PAGE.format(tool_items=tool_items)


@app.api_route("/", methods=ANY_METHOD, response_class=HTMLResponse, tags=["Health"])
async def root() -> HTMLResponse:
    """Landing page with the tool list and endpoints."""
    return HTMLResponse(render_landing_page())


@app.api_route("/status", methods=ANY_METHOD, response_model=StatusResponse, tags=["Health"])
async def status() -> StatusResponse:
    """Health check endpoint."""
    return StatusResponse()


# ============ MCP ENDPOINTS ============


@app.post("/mcp", tags=["MCP"])
async def mcp_endpoint(request: Request) -> JSONResponse:
    """
    MCP JSON-RPC endpoint.

    The whole body is read before dispatch. The router's response is always
    returned with HTTP 200, including JSON-RPC errors.
    """
    body = await request.body()
    return JSONResponse(mcp_router.handle_request(body))


@app.get("/mcp/sse", tags=["MCP", "SSE"])
async def mcp_sse_endpoint(request: Request) -> StreamingResponse:
    """
    SSE stub: a connected event followed by periodic heartbeats.

    Returns:
        SSE stream that ends when the client disconnects
    """
    return StreamingResponse(
        heartbeat_event_stream(request, interval=settings.sse_heartbeat_interval),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "gkg_mcp.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
