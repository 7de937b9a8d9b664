# src/paper_invest/main.py
"""Process entry point: validate configuration, then serve MCP."""

import sys

from src.paper_invest.core.dependencies import Container
from src.paper_invest.core.errors import ConfigurationError
from src.paper_invest.utils.logger import configure_logging, logger


def main() -> None:
    settings = Container.config()
    configure_logging(settings.logging.level)

    try:
        settings.require_api_key()
    except ConfigurationError as e:
        logger.error("❌ Startup configuration error", error=str(e))
        sys.exit(1)

    # Imported late so a missing key fails before any server setup
    from src.paper_invest.mcp.server import create_mcp_server

    mcp = create_mcp_server()
    transport = settings.mcp.transport
    logger.info("✅ Serving MCP", transport=transport)

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport=transport, host=settings.mcp.host, port=settings.mcp.port)


if __name__ == "__main__":
    main()
