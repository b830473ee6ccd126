"""Entry point for the Etsy MCP Server.

Runs the server on stdio. Credentials come from ETSY_API_KEY,
ETSY_SHOP_ID and ETSY_ACCESS_TOKEN (environment or .env).
"""

import logging
import sys

from etsy_mcp.config.base import settings
from etsy_mcp.config.etsy import MissingCredentialError
from etsy_mcp.servers.etsy.server import create_server

# Setup logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


# For direct execution
def main() -> None:
    """Run the MCP server."""
    logger.info("Starting Etsy MCP Server...")
    logger.info(f"Server name: {settings.server_name}")

    try:
        app = create_server()
    except MissingCredentialError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    app.run()


if __name__ == "__main__":
    main()
