"""rpncalc Web Server - JSON endpoints for postfix conversion and evaluation."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from rpncalc import __version__
from rpncalc.errors import get_http_status_for_error, map_error_for_web
from rpncalc.exceptions import RpnCalcError, ValidationError
from rpncalc.logger import session_logger as logger
from rpncalc.math_engine import MathEngine, get_engine


class ExpressionRequest(BaseModel):
    """Request body for /postfix and /evaluate."""

    model_config = ConfigDict(extra="forbid")

    expression: str


class RpnCalcWebServer:
    """Web server exposing the expression capability over HTTP."""

    SERVICE_NAME = "rpncalc-web"

    def __init__(
        self,
        engine: Optional[MathEngine] = None,
        host: str = "0.0.0.0",
        port: int = 8022,
    ):
        self.engine = engine or get_engine()
        self.host = host
        self.port = port
        self.app = self._create_app()

    def _create_app(self) -> Starlette:
        """Create the Starlette application."""
        routes = [
            Route("/", endpoint=self.root, methods=["GET"]),
            Route("/ping", endpoint=self.ping, methods=["GET"]),
            Route("/health", endpoint=self.health, methods=["GET"]),
            Route("/postfix", endpoint=self.postfix, methods=["POST"]),
            Route("/evaluate", endpoint=self.evaluate, methods=["POST"]),
        ]

        middleware = [
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "POST"],
                allow_headers=["*"],
            ),
        ]

        return Starlette(debug=False, routes=routes, middleware=middleware)

    async def root(self, request: Request) -> JSONResponse:
        """Root endpoint."""
        return JSONResponse({
            "service": self.SERVICE_NAME,
            "status": "ok",
            "version": __version__,
        })

    async def ping(self, request: Request) -> JSONResponse:
        """Health check ping endpoint."""
        return JSONResponse({"status": "ok", "service": self.SERVICE_NAME})

    async def health(self, request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "service": self.SERVICE_NAME,
            "capabilities": self.engine.list_capabilities(),
        })

    async def postfix(self, request: Request) -> JSONResponse:
        """Convert the posted infix expression to postfix notation."""
        return await self._run(request, self.engine.to_postfix)

    async def evaluate(self, request: Request) -> JSONResponse:
        """Evaluate the posted infix expression."""
        return await self._run(request, self.engine.evaluate)

    async def _run(self, request: Request, operation: Any) -> JSONResponse:
        try:
            payload = await self._parse_body(request)
            result = operation(payload.expression)
        except (RpnCalcError, PydanticValidationError) as e:
            logger.warning(
                "Request rejected",
                path=request.url.path,
                error_type=type(e).__name__,
                error=str(e),
            )
            return JSONResponse(map_error_for_web(e), status_code=get_http_status_for_error(e))

        body: Dict[str, Any] = {"status": "ok"}
        body.update(result.to_dict())
        return JSONResponse(body)

    async def _parse_body(self, request: Request) -> ExpressionRequest:
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Request body must be valid JSON")
        return ExpressionRequest.model_validate(data)

    def get_app(self) -> Starlette:
        """Return the ASGI application."""
        return self.app
