import json
from common.enums import ContentType
from common.models import ContentItem, ToolResultEnvelope

def _metadata_item(data) -> ContentItem:
    return ContentItem(type=ContentType.TEXT, text=json.dumps(data, indent=2))

def tool_result(data) -> ToolResultEnvelope:
    return ToolResultEnvelope(content=[_metadata_item(data)])

def tool_result_with_image(data, image_data: str) -> ToolResultEnvelope:
    '''Inline PNG first, JSON metadata second.'''
    image = ContentItem(type=ContentType.IMAGE, data=image_data, mime_type='image/png')
    return ToolResultEnvelope(content=[image, _metadata_item(data)])

def tool_error(message: str) -> ToolResultEnvelope:
    return ToolResultEnvelope(
        content=[ContentItem(type=ContentType.TEXT, text=message)],
        is_error=True,
    )
