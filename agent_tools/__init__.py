# Auto-import tool modules to register MCP tools
# This ensures decorators execute when the package is imported
from . import image_generation_tool

__all__ = ['image_generation_tool']
