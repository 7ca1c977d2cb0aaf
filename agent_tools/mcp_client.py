from fastmcp import FastMCP, Client
from contextlib import asynccontextmanager
from core.app_config import ServerConfig

SERVER_INSTRUCTIONS = """
Image generation and understanding with Google Gemini (Nano Banana).

- generate_image: text-to-image, saves a PNG and returns it inline.
- edit_image: transform an existing image with a text instruction.
- compose_images: combine up to 14 source images (about 9 with "flash") into a new image.
- describe_image: text description of an image.

Gemini image generation is rate limited to roughly 2-5 requests per minute.
"""

# Server instance for tool registration
mcp_server = FastMCP(
    ServerConfig.NAME,
    version=ServerConfig.VERSION,
    instructions=SERVER_INSTRUCTIONS,
)

# IMPORTANT: Do not remove this import
# Importing the tool module registers tools via decorators
# This must happen after mcp_server is defined
from agent_tools import image_generation_tool

@asynccontextmanager
async def get_mcp_client():
    """
    Get MCP client for in-memory testing and internal tool calls.

    Usage:
        async with get_mcp_client() as client:
            result = await client.call_tool("generate_image", {"prompt": "a red fox"})
    """
    async with Client(mcp_server) as client:
        yield client
