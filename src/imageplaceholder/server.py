"""MCP server exposing the image_placeholder tool."""

import logging
from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from imageplaceholder.models.config import ServerConfig
from imageplaceholder.models.errors import PlaceholderError, is_client_error
from imageplaceholder.providers.factory import UrlBuilderFactory
from imageplaceholder.services.placeholder_service import PlaceholderGenerator

logger = logging.getLogger(__name__)

TOOL_NAME = "image_placeholder"
TOOL_DESCRIPTION = (
    "Generate a placeholder image based on a provider, width, and height. "
    "Use this tool to generate a placeholder image for testing or development purposes."
)
DIMENSION_DESCRIPTION = "The {} of the image, must be a positive integer between 1 and 10000."

# Advertised schema enum, taken from the builder table
ProviderName = Literal[tuple(UrlBuilderFactory.get_supported_providers())]


def create_server(generator: PlaceholderGenerator, config: ServerConfig | None = None) -> FastMCP:
    """
    Build the MCP server.

    Args:
        generator: Generator used to answer tool calls
        config: Server settings (name advertised to clients)

    Returns:
        FastMCP app with the image_placeholder tool registered
    """
    config = config or ServerConfig()
    providers = generator.get_supported_providers()

    mcp = FastMCP(config.name, instructions=TOOL_DESCRIPTION)

    @mcp.tool(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": True},
    )
    def image_placeholder(
        provider: Annotated[
            ProviderName,
            Field(description=f"The provider to use for the image, must be one of: {', '.join(providers)}."),
        ],
        width: Annotated[float, Field(description=DIMENSION_DESCRIPTION.format("width"))],
        height: Annotated[float, Field(description=DIMENSION_DESCRIPTION.format("height"))],
    ) -> str:
        """Return the placeholder image URL as text."""
        logger.debug(f"Handling {TOOL_NAME} call: provider={provider}, width={width}, height={height}")

        try:
            result = generator.generate_placeholder({"provider": provider, "width": width, "height": height})
        except PlaceholderError as e:
            log = logger.warning if is_client_error(e.code) else logger.error
            log(f"{TOOL_NAME} call failed: {e.message}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error during {TOOL_NAME} execution")
            raise PlaceholderError.internal(
                f"Unexpected error during {TOOL_NAME} execution: {e}",
                original_exception=e,
                tool_name=TOOL_NAME,
            ) from e

        logger.info(
            f"{TOOL_NAME} call completed: {result.provider.value} "
            f"{result.dimensions.width}x{result.dimensions.height}"
        )
        return result.url

    return mcp
