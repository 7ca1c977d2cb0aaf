"""
Shared argument types for the image tools.

Closed enumerations are plain Literal types rather than Enum classes so
FastMCP inlines them as "enum" lists instead of generating $defs in the tool
JSON schemas, which some MCP clients handle badly.

Keep Pydantic models (ToolArgModel subclasses) for internal validation only.
"""

from typing import Literal
from pydantic import BaseModel, ConfigDict

ModelChoice = Literal['flash', 'pro']

AspectRatio = Literal[
    '1:1', '16:9', '9:16', '4:3', '3:4', '3:2', '2:3', '21:9', '4:5', '5:4'
]

ImageSize = Literal['1K', '2K', '4K']


class ToolArgModel(BaseModel):
    """
    Base class for internal Pydantic models (NOT for tool signatures).

    Configured to prevent $defs from appearing in JSON schemas and to reject
    unexpected fields.
    """

    model_config = ConfigDict(
        json_schema_mode_override='validation',
        extra='forbid'
    )
