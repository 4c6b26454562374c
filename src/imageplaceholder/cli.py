"""Console entry point for the ImagePlaceholder MCP server."""

import logging
import os
import sys

from imageplaceholder.config import create_config, create_provider_config, create_validation_constraints
from imageplaceholder.models.errors import PlaceholderError
from imageplaceholder.server import create_server
from imageplaceholder.services.placeholder_service import PlaceholderGenerator
from imageplaceholder.services.validation_service import PlaceholderValidator
from imageplaceholder.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


# transport can be specified with MCP_TRANSPORT env variable (defaults to stdio)
# host and port are only used by the HTTP transports
def run_server() -> None:
    """Load configuration, wire the components and run the MCP server."""
    try:
        config = create_config()
        constraints = create_validation_constraints()
        provider_config = create_provider_config()
    except PlaceholderError as e:
        # Logging is not configured yet
        print(f"Failed to start image placeholder server: {e}", file=sys.stderr)
        print(f"Error details: {e.context}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level, config.environment)
    logger.info(
        f"Initializing {config.name} v{config.version} "
        f"(environment={config.environment}, log_level={config.log_level})"
    )

    validator = PlaceholderValidator(constraints)
    generator = PlaceholderGenerator(validator, provider_config)
    mcp = create_server(generator, config)

    transport = os.getenv("MCP_TRANSPORT", "stdio")
    logger.info(f"Serving {generator.get_supported_providers()} over {transport}")

    try:
        if transport == "stdio":
            mcp.run(transport="stdio")
        else:
            host = os.getenv("HOST", "0.0.0.0")
            port = int(os.getenv("PORT", "8000"))
            mcp.run(transport=transport, host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down")


if __name__ == "__main__":
    run_server()
