"""
Image Tool Handler

Core logic behind the four image tools. Each operation builds the request
parts, makes one Gemini call, extracts the result and formats it into a
ToolResultEnvelope.

Handlers never raise: every failure comes back as an error envelope whose
message is prefixed with the operation ("Failed to edit image: ...").

Usage:
    from handlers.image_generation import image_tool_handler

    envelope = await image_tool_handler.generate(prompt="a red fox", model="flash")
"""

from typing import Optional
from core.app_config import ImageConfig
from core.logger_config import logger
from common.enums import ResponseModality
from common.models import GeminiPart, ToolResultEnvelope
from handlers.image_files import read_image_as_base64
from handlers.response_extractor import extract_result
from handlers.tool_results import tool_result, tool_result_with_image, tool_error
from inference.providers.gemini_client import GeminiClient, gemini_client

TEXT_AND_IMAGE = [ResponseModality.TEXT, ResponseModality.IMAGE]

NO_IMAGE_GENERATE = ("No image was generated. The model may have refused the prompt "
                     "due to safety filters. Try rephrasing.")
NO_IMAGE_EDIT = ("No image was generated. The model may have refused the edit. "
                 "Try a different instruction.")
NO_IMAGE_COMPOSE = "No image was generated from composition. Try a different instruction."
NO_DESCRIPTION = "No description was generated."


class ImageToolHandler:
    '''
        Translates image tool calls into Gemini requests and results.
    '''
    def __init__(self, client: GeminiClient):
        self.client = client

    @staticmethod
    def _image_part(image_path: str) -> GeminiPart:
        return GeminiPart(inline_data=read_image_as_base64(image_path))

    async def _generate_image(self, parts: list[GeminiPart], model: str,
                              aspect_ratio: Optional[str], image_size: Optional[str],
                              output_dir: str, no_image_message: str,
                              metadata: dict) -> ToolResultEnvelope:
        # Shared generate/edit/compose flow, exceptions handled by the caller
        response = await self.client.send(
            model=model,
            parts=parts,
            response_modalities=TEXT_AND_IMAGE,
            aspect_ratio=aspect_ratio,
            image_size=image_size,
        )

        result = extract_result(response, output_dir)
        if not result.image_path:
            logger.info(f'No image part in response for model {model}')
            return tool_error(no_image_message)

        logger.info(f'Saved generated image to {result.image_path}')
        data = {'saved_to': result.image_path, **metadata, 'description': result.text}
        return tool_result_with_image(data, response.first_image_data())

    async def generate(self, prompt: str, model: str = 'flash', aspect_ratio: str = '1:1',
                       image_size: str = '1K',
                       output_dir: str = ImageConfig.DEFAULT_OUTPUT_DIR) -> ToolResultEnvelope:
        try:
            return await self._generate_image(
                parts=[GeminiPart(text=prompt)],
                model=model,
                aspect_ratio=aspect_ratio,
                image_size=image_size,
                output_dir=output_dir,
                no_image_message=NO_IMAGE_GENERATE,
                metadata={'model': model, 'aspect_ratio': aspect_ratio, 'image_size': image_size},
            )
        except Exception as e:
            logger.error(f'Image generation failed: {e}')
            return tool_error(f'Failed to generate image: {e}')

    async def edit(self, image_path: str, instruction: str, model: str = 'flash',
                   aspect_ratio: Optional[str] = None, image_size: str = '1K',
                   output_dir: str = ImageConfig.DEFAULT_OUTPUT_DIR) -> ToolResultEnvelope:
        # No aspect ratio keeps the source proportions
        try:
            return await self._generate_image(
                parts=[self._image_part(image_path), GeminiPart(text=instruction)],
                model=model,
                aspect_ratio=aspect_ratio,
                image_size=image_size,
                output_dir=output_dir,
                no_image_message=NO_IMAGE_EDIT,
                metadata={'source': image_path, 'instruction': instruction, 'model': model},
            )
        except Exception as e:
            logger.error(f'Image edit failed for {image_path}: {e}')
            return tool_error(f'Failed to edit image: {e}')

    async def compose(self, image_paths: list[str], instruction: str, model: str = 'flash',
                      aspect_ratio: str = '1:1', image_size: str = '1K',
                      output_dir: str = ImageConfig.DEFAULT_OUTPUT_DIR) -> ToolResultEnvelope:
        try:
            parts = [self._image_part(path) for path in image_paths]
            parts.append(GeminiPart(text=instruction))
            return await self._generate_image(
                parts=parts,
                model=model,
                aspect_ratio=aspect_ratio,
                image_size=image_size,
                output_dir=output_dir,
                no_image_message=NO_IMAGE_COMPOSE,
                metadata={'sources': image_paths, 'instruction': instruction, 'model': model},
            )
        except Exception as e:
            logger.error(f'Image composition failed for {len(image_paths)} images: {e}')
            return tool_error(f'Failed to compose images: {e}')

    async def describe(self, image_path: str,
                       prompt: str = ImageConfig.DEFAULT_DESCRIBE_PROMPT,
                       model: str = 'flash') -> ToolResultEnvelope:
        '''
            Text-only request. The extractor is not used: nothing is written
            to disk and an empty candidate list is reported as "no description"
            even when the response carries an error descriptor.
        '''
        try:
            response = await self.client.send(
                model=model,
                parts=[self._image_part(image_path), GeminiPart(text=prompt)],
                response_modalities=[ResponseModality.TEXT],
            )

            if not response.candidates:
                return tool_error(NO_DESCRIPTION)

            description = '\n'.join(part.text for part in response.first_parts() if part.text)
            return tool_result({'image_path': image_path, 'description': description, 'model': model})
        except Exception as e:
            logger.error(f'Image description failed for {image_path}: {e}')
            return tool_error(f'Failed to describe image: {e}')


image_tool_handler = ImageToolHandler(gemini_client)
