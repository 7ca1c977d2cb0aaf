from common.models import GeminiResponse, ExtractedResult
from handlers.image_files import save_base64_image
from inference.providers.gemini_client import GeminiApiError

def extract_result(response: GeminiResponse, output_dir: str) -> ExtractedResult:
    """
    Turn a successful generateContent response into text plus a saved image.

    Only the first candidate is read. Text parts are joined with newlines in
    the order they appear; every inline image is written to output_dir as it
    is encountered and the last one written wins. A response with no
    candidates is only a failure when it carries an error descriptor.
    """
    if not response.candidates:
        if response.error:
            raise GeminiApiError(response.error.code or 500, response.error.message or '')
        return ExtractedResult()

    text_parts = []
    image_path = None
    for part in response.first_parts():
        if part.text:
            text_parts.append(part.text)
        if part.inline_data and part.inline_data.data:
            image_path = save_base64_image(part.inline_data.data, output_dir)

    return ExtractedResult(
        text='\n'.join(text_parts) if text_parts else None,
        image_path=image_path,
    )
