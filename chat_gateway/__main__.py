"""Entry point for running the chat gateway."""

import uvicorn

from chat_gateway.config.settings import settings
from chat_gateway.infrastructure.logging.logger import logger


def main():
    """Run the chat gateway HTTP server."""
    logger.info(f"Starting chat gateway on {settings.app_host}:{settings.app_port}")

    uvicorn.run(
        "chat_gateway.api.app:app",
        host=settings.app_host,
        port=settings.app_port,
    )


if __name__ == "__main__":
    main()
