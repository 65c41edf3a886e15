"""FastAPI MCP Server - HTTP transport and application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lmtools_mcp.config.loader import get_settings
from lmtools_mcp.mcp.context import ServerContext
from lmtools_mcp.mcp.errors import PARSE_ERROR, make_error_data
from lmtools_mcp.mcp.jsonrpc import JsonRpcProcessor
from lmtools_mcp.utils.logging import get_logger, set_request_id, setup_logging


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(context: ServerContext | None = None) -> FastAPI:
    """Create the HTTP application serving MCP requests for a server context."""
    if context is None:
        context = ServerContext(get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        settings = context.settings
        setup_logging(settings)
        log = get_logger("startup")

        log.info("Starting MCP server")
        await context.init()
        log.info(
            "MCP Server is running",
            url=f"http://localhost:{settings.port}",
        )

        yield

        # uvicorn has already drained in-flight requests at this point
        log.info("Shutting down MCP server")
        await context.shutdown()

    app = FastAPI(
        title="VS Code LM Tools MCP Server",
        description="Exposes host language-model tools over the Model Context Protocol",
        version=context.settings.server_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = context

    @app.middleware("http")
    async def add_response_headers(request: Request, call_next):
        """Add request ID and CORS headers to all responses."""
        request_id = request.headers.get("X-Request-ID") or set_request_id()
        set_request_id(request_id)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.post("/{path:path}")
    async def message_endpoint(request: Request, path: str) -> Response:
        """
        Accept one JSON-RPC 2.0 message per POST and return its response.

        Notifications get a 200 with a null body.
        """
        log = get_logger("mcp")

        try:
            body = await request.body()
        except Exception as e:
            log.warning("Could not read request body", error=str(e))
            return JSONResponse(
                status_code=400,
                content={"jsonrpc": "2.0", "id": None, "error": make_error_data(PARSE_ERROR)},
            )

        processor = JsonRpcProcessor(request.app.state.context)
        response, status_code = await processor.handle_message(body)

        content = response.model_dump() if response is not None else None
        log.debug(
            "Sending MCP response",
            status_code=status_code,
            is_error=bool(content and "error" in content),
        )
        return JSONResponse(status_code=status_code, content=content)

    @app.options("/{path:path}")
    async def preflight(path: str) -> Response:
        """CORS preflight; headers are added by the middleware."""
        return Response(status_code=200)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Answer every method other than POST and OPTIONS with a plain 404."""
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    return app


# Application served by uvicorn
app = create_app()


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "lmtools_mcp.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
