from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from common.enums import ResponseModality, ContentType
from common.tool_args import ToolArgModel, ModelChoice, AspectRatio, ImageSize

# ============================================================================
# GEMINI WIRE MODELS
# ============================================================================

class GeminiWireModel(BaseModel):
    """ Gemini REST payloads use camelCase keys; fields here are snake_case """
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

class InlineData(GeminiWireModel):
    # Responses may omit mimeType; only data is needed to save the image
    mime_type: Optional[str] = Field(default=None, alias='mimeType', description="MIME type of the image payload")
    data: Optional[str] = Field(default=None, description="Base64-encoded image bytes")

class GeminiPart(GeminiWireModel):
    """ One content unit: inline text or an inline image """
    text: Optional[str] = None
    inline_data: Optional[InlineData] = Field(default=None, alias='inlineData')

class GeminiContent(GeminiWireModel):
    parts: list[GeminiPart] = Field(default_factory=list)
    role: Optional[str] = None

class GeminiCandidate(GeminiWireModel):
    # Blocked candidates come back with a finishReason and no content
    content: Optional[GeminiContent] = None
    finish_reason: Optional[str] = Field(default=None, alias='finishReason')

class GeminiErrorInfo(GeminiWireModel):
    message: Optional[str] = None
    code: Optional[int] = None
    status: Optional[str] = None

class GeminiResponse(GeminiWireModel):
    candidates: Optional[list[GeminiCandidate]] = None
    error: Optional[GeminiErrorInfo] = None

    def first_parts(self) -> list[GeminiPart]:
        ''' Parts of the top-ranked candidate, later candidates are ignored '''
        if not self.candidates or self.candidates[0].content is None:
            return []
        return self.candidates[0].content.parts

    def first_image_data(self) -> Optional[str]:
        for part in self.first_parts():
            if part.inline_data and part.inline_data.data:
                return part.inline_data.data
        return None

# ============================================================================
# REQUEST / RESULT MODELS
# ============================================================================

class GenerationRequest(ToolArgModel):
    model: ModelChoice = Field(description="Model choice, resolved to a Gemini model id")
    parts: list[GeminiPart] = Field(description="Ordered content parts sent as the user turn")
    response_modalities: list[ResponseModality] = Field(description="Requested output kinds")
    aspect_ratio: Optional[AspectRatio] = None
    image_size: Optional[ImageSize] = None

class ExtractedResult(BaseModel):
    text: Optional[str] = Field(default=None, description="Text parts joined with newlines")
    image_path: Optional[str] = Field(default=None, description="Path of the saved image file")

# ============================================================================
# TOOL RESULT ENVELOPE
# ============================================================================

class ContentItem(BaseModel):
    type: ContentType
    text: Optional[str] = None
    data: Optional[str] = None
    mime_type: Optional[str] = None

class ToolResultEnvelope(BaseModel):
    content: list[ContentItem] = Field(description="Ordered result content items")
    is_error: bool = Field(default=False, description="Whether the tool call failed or not")

    def error_message(self) -> str:
        return '\n'.join(item.text for item in self.content if item.text)
