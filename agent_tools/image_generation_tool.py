"""
Image Generation Tools (Agent Tools Wrapper)

Registers the four Gemini image tools on the FastMCP server. Argument
validation happens here, through the Annotated/Field signatures, before any
handler code runs.

The core logic lives in handlers/image_generation.py - this file only
declares the tool surface and converts handler envelopes to MCP results.
"""

from agent_tools.mcp_client import mcp_server
from core.app_config import ImageConfig
from common.enums import ContentType
from common.models import ToolResultEnvelope
from common.tool_args import ModelChoice, AspectRatio, ImageSize
from handlers.image_generation import image_tool_handler
from fastmcp.exceptions import ToolError
from fastmcp.tools import ToolResult
from mcp.types import ImageContent, TextContent, ToolAnnotations
from pydantic import Field
from typing import Annotated, Optional

# ============================================================================
# ARGUMENT TYPES
# ============================================================================

Model = Annotated[ModelChoice, Field(
    description='Model to use. "flash" = gemini-2.5-flash (fast, cheap, 1K max). '
                '"pro" = gemini-3-pro (high quality, up to 4K).'
)]
Ratio = Annotated[AspectRatio, Field(description="Aspect ratio of the generated image")]
Size = Annotated[ImageSize, Field(
    description='Image resolution. "1K" = 1024px, "2K" = 2048px, "4K" = 4096px. '
                '2K/4K only available with "pro" model.'
)]
OutputDir = Annotated[str, Field(
    description="Directory where generated images will be saved. Defaults to current working directory."
)]
SourceImage = Annotated[str, Field(description="Absolute path to the source image file", min_length=1)]

GENERATIVE_TOOL = dict(read_only_hint=False, destructive_hint=False, open_world_hint=True)

# ============================================================================
# RESULT CONVERSION
# ============================================================================

def to_mcp_result(envelope: ToolResultEnvelope) -> ToolResult:
    '''
        Success envelopes become MCP content blocks. Error envelopes are raised
        as ToolError, which FastMCP reports as an isError result carrying the message.
    '''
    if envelope.is_error:
        raise ToolError(envelope.error_message())

    content = []
    for item in envelope.content:
        if item.type == ContentType.IMAGE:
            content.append(ImageContent(type='image', data=item.data, mime_type=item.mime_type))
        else:
            content.append(TextContent(type='text', text=item.text))
    return ToolResult(content=content)

# ============================================================================
# IMAGE TOOLS
# ============================================================================

class ImageGenerationTool:
    @staticmethod
    @mcp_server.tool(
        name='generate_image',
        annotations=ToolAnnotations(title='Generate Image', **GENERATIVE_TOOL),
    )
    async def generate_image(
        prompt: Annotated[str, Field(
            description="Text prompt describing the image to generate. English prompts produce best results.",
            min_length=1
        )],
        model: Model = 'flash',
        aspect_ratio: Ratio = '1:1',
        image_size: Size = '1K',
        output_dir: OutputDir = ImageConfig.DEFAULT_OUTPUT_DIR
    ) -> ToolResult:
        """Generate an image from a text prompt using Google Gemini (Nano Banana).
        Returns the generated image and saves it as a PNG file.
        """
        envelope = await image_tool_handler.generate(
            prompt=prompt, model=model, aspect_ratio=aspect_ratio,
            image_size=image_size, output_dir=output_dir
        )
        return to_mcp_result(envelope)

    @staticmethod
    @mcp_server.tool(
        name='edit_image',
        annotations=ToolAnnotations(title='Edit Image', **GENERATIVE_TOOL),
    )
    async def edit_image(
        image_path: SourceImage,
        instruction: Annotated[str, Field(
            description='Text instruction describing the desired edit (e.g., "make it look like a '
                        'watercolor painting", "remove the background", "add sunglasses")',
            min_length=1
        )],
        model: Model = 'flash',
        aspect_ratio: Annotated[Optional[AspectRatio], Field(
            description="Aspect ratio override. If omitted, preserves original proportions."
        )] = None,
        image_size: Size = '1K',
        output_dir: OutputDir = ImageConfig.DEFAULT_OUTPUT_DIR
    ) -> ToolResult:
        """Edit or transform an existing image using a text instruction.
        Supports style transfer, object manipulation, background changes, and more.
        """
        envelope = await image_tool_handler.edit(
            image_path=image_path, instruction=instruction, model=model,
            aspect_ratio=aspect_ratio, image_size=image_size, output_dir=output_dir
        )
        return to_mcp_result(envelope)

    @staticmethod
    @mcp_server.tool(
        name='compose_images',
        annotations=ToolAnnotations(title='Compose Images', **GENERATIVE_TOOL),
    )
    async def compose_images(
        image_paths: Annotated[list[str], Field(
            description="Array of absolute paths to source image files (1-9 for flash, up to 14 for pro)",
            min_length=1,
            max_length=ImageConfig.MAX_COMPOSE_IMAGES
        )],
        instruction: Annotated[str, Field(
            description='Text instruction describing how to combine the images (e.g., "blend these '
                        'photos into a panorama", "create a collage with all images")',
            min_length=1
        )],
        model: Model = 'flash',
        aspect_ratio: Ratio = '1:1',
        image_size: Size = '1K',
        output_dir: OutputDir = ImageConfig.DEFAULT_OUTPUT_DIR
    ) -> ToolResult:
        """Combine multiple source images into a new image using a text instruction.
        Supports blending, collage, style mixing, and creative composition with
        up to 9 images (14 with pro model).
        """
        envelope = await image_tool_handler.compose(
            image_paths=image_paths, instruction=instruction, model=model,
            aspect_ratio=aspect_ratio, image_size=image_size, output_dir=output_dir
        )
        return to_mcp_result(envelope)

    @staticmethod
    @mcp_server.tool(
        name='describe_image',
        annotations=ToolAnnotations(
            title='Describe Image', read_only_hint=True, destructive_hint=False, open_world_hint=True
        ),
    )
    async def describe_image(
        image_path: Annotated[str, Field(description="Absolute path to the image file to describe", min_length=1)],
        prompt: Annotated[str, Field(
            description="Custom prompt for the description. Defaults to a general detailed description."
        )] = ImageConfig.DEFAULT_DESCRIBE_PROMPT,
        model: Model = 'flash'
    ) -> ToolResult:
        """Analyze and describe the content of an image using Gemini vision.
        Returns a detailed text description.
        """
        envelope = await image_tool_handler.describe(image_path=image_path, prompt=prompt, model=model)
        return to_mcp_result(envelope)
