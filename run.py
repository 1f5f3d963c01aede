#!/usr/bin/env python3
"""
Run the model client sidecar with the Azure OpenAI client.
"""

import uvicorn

from aimodel_client import create_app, get_model_client, get_settings
from aimodel_client.log_config import setup_logging

settings = get_settings()
setup_logging(settings)

app = create_app(
    client_factory=lambda: get_model_client("azure"),
    title="Model Client Sidecar (Azure OpenAI)",
)

if __name__ == "__main__":
    print("Starting model client sidecar...")
    print(f"Server will be available at: http://{settings.host}:{settings.port}")
    print(f"Log level: {settings.log_level}")
    print("-" * 50)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
