"""
FastAPI application factory for the model client sidecar.

Exposes a single model client over HTTP so services in other processes can
invoke it. The client never raises, so /invoke always answers 200 and reports
how the call ended in the "outcome" field.
"""
import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, HTTPException

from .models import AIModelID, HealthResponse, InvokeResponse, ModelInfo, ModelRequest
from .provider import AIModelClient

logger = logging.getLogger(__name__)


def create_app(
    client_factory: Callable[[], AIModelClient],
    title: str = "Model Client Sidecar",
    description: str = "Single-model invocation adapter",
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create a FastAPI application around a model client.

    Args:
        client_factory: Callable returning an initialized AIModelClient.
                        Called during app startup.
        title: OpenAPI title
        description: OpenAPI description
        version: OpenAPI version

    Returns:
        Configured FastAPI application

    Example:
        ```python
        from aimodel_client import create_app, get_model_client

        app = create_app(lambda: get_model_client("azure"))
        ```
    """

    # Client instance, set during startup
    client: AIModelClient | None = None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        nonlocal client

        logger.info("Model client sidecar starting up")
        client = client_factory()
        logger.info("Provider: %s", client.provider_name)
        default = client.default_model
        logger.info("Default model: %s", default.name if default else "<none>")

        yield

        logger.info("Model client sidecar shutting down")
        if client:
            client.shutdown()

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
    )

    @app.get("/health", response_model=HealthResponse)
    def health():
        """Health check endpoint."""
        if client is None:
            return HealthResponse(
                status="degraded",
                provider="unknown",
                error="Client not initialized",
            )

        default = client.default_model
        return HealthResponse(
            status="ok",
            provider=client.provider_name,
            default_model=default.name if default else None,
        )

    @app.get("/models", response_model=list[ModelInfo])
    def models():
        """List the known model identifiers."""
        return [ModelInfo(name=m.name, model_id=m.model_id) for m in AIModelID]

    @app.get("/stats")
    def stats_endpoint():
        """Get invocation statistics."""
        if client is None:
            return {"error": "Client not initialized"}

        default = client.default_model
        return client.stats.snapshot(
            provider=client.provider_name,
            default_model=default.name if default else None,
        )

    @app.post("/invoke", response_model=InvokeResponse)
    def invoke(request: ModelRequest):
        """Invoke the model once."""
        if client is None:
            raise HTTPException(status_code=503, detail="Client not initialized")

        result = client.invoke_detailed(request)
        logger.debug("Invoke outcome: %s, latency=%sms", result.outcome.value, result.latency_ms)

        return InvokeResponse(
            outcome=result.outcome.value,
            content=result.as_text(),
            latency_ms=result.latency_ms,
        )

    return app
