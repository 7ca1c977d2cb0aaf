import httpx
from typing import Optional
from core.app_config import TokenKeys, GeminiConfig
from core.logger_config import logger
from common.enums import ResponseModality
from common.models import GenerationRequest, GeminiPart, GeminiResponse


class GeminiApiError(Exception):
    '''
        Non-success outcome of a Gemini call: a non-2xx HTTP status or an
        explicit error descriptor in an otherwise empty response.
    '''
    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


def resolve_model(choice: str) -> str:
    '''Map a tool-facing model choice ("flash" / "pro") to the Gemini model id.'''
    try:
        return GeminiConfig.MODELS[choice]
    except KeyError:
        raise ValueError(
            f"Unknown model choice: {choice!r} (expected one of {', '.join(GeminiConfig.MODELS)})"
        ) from None


def _error_message(response: httpx.Response) -> str:
    # body.message -> body.error.message -> HTTP reason phrase
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get('message')
    if not message:
        error = body.get('error')
        if isinstance(error, dict):
            message = error.get('message')
    return message or response.reason_phrase


class GeminiClient:
    '''
        Sends generateContent requests to the Gemini REST API.
        One POST per call, no retries.
    '''
    def __init__(self, api_key: Optional[str], base_url: str = GeminiConfig.BASE_URL,
                 timeout: Optional[float] = GeminiConfig.REQUEST_TIMEOUT_SEC,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        # Tests inject httpx.MockTransport here
        self._transport = transport

    @staticmethod
    def build_body(request: GenerationRequest) -> dict:
        modalities = [modality.value for modality in request.response_modalities]
        generation_config = {'responseModalities': modalities}

        # imageConfig only carries the values that were actually supplied
        if ResponseModality.IMAGE in request.response_modalities and \
                (request.aspect_ratio or request.image_size):
            image_config = {}
            if request.aspect_ratio:
                image_config['aspectRatio'] = request.aspect_ratio
            if request.image_size:
                image_config['imageSize'] = request.image_size
            generation_config['imageConfig'] = image_config

        parts = [part.model_dump(by_alias=True, exclude_none=True) for part in request.parts]
        return {
            'contents': [{'role': 'user', 'parts': parts}],
            'generationConfig': generation_config,
        }

    async def generate_content(self, request: GenerationRequest) -> GeminiResponse:
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY not set in environment variables")

        model_id = resolve_model(request.model)
        url = f"{self.base_url}/models/{model_id}:generateContent"
        headers = {
            'Content-Type': 'application/json',
            GeminiConfig.API_KEY_HEADER: self.api_key,
        }

        logger.debug(f'POST {model_id}:generateContent '
                     f'modalities={[m.value for m in request.response_modalities]} '
                     f'parts={len(request.parts)}')

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(url, json=self.build_body(request), headers=headers)

        if not response.is_success:
            status = response.status_code
            message = _error_message(response)
            logger.warning(f'Gemini API request failed ({status}): {message}')

            if status == 429:
                raise GeminiApiError(429, GeminiConfig.RATE_LIMIT_MESSAGE)
            raise GeminiApiError(status, f"Gemini API error ({status}): {message}")

        return GeminiResponse.model_validate(response.json())

    async def send(self, model: str, parts: list[GeminiPart],
                   response_modalities: list[ResponseModality],
                   aspect_ratio: Optional[str] = None,
                   image_size: Optional[str] = None) -> GeminiResponse:
        request = GenerationRequest(
            model=model,
            parts=parts,
            response_modalities=response_modalities,
            aspect_ratio=aspect_ratio,
            image_size=image_size,
        )
        return await self.generate_content(request)


gemini_client = GeminiClient(api_key=TokenKeys.GEMINI_API_KEY)
