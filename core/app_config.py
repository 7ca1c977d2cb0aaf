import os
from dotenv import load_dotenv
# Load environment variables from .env file
load_dotenv()

# API token keys loaded from environment
class TokenKeys:
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', None)

# Keys that must be present before the server accepts any tool call
REQUIRED_KEYS = ('GEMINI_API_KEY',)

# Optional numeric settings; a malformed value is reported at startup
POSITIVE_FLOAT_SETTINGS = ('GEMINI_TIMEOUT_SEC',)

def _parse_positive_float(value: str):
    try:
        number = float(value)
    except ValueError:
        return None
    return number if number > 0 else None

def _optional_float(name: str):
    value = os.getenv(name)
    return _parse_positive_float(value) if value else None

# MCP server identity and process-level settings
class ServerConfig:
    NAME = 'mcp-nano-banana'
    VERSION = '1.0.0'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    API_KEY_URL = 'https://aistudio.google.com/apikey'

# Gemini generateContent endpoint configuration
class GeminiConfig:
    BASE_URL = 'https://generativelanguage.googleapis.com/v1beta'
    API_KEY_HEADER = 'x-goog-api-key'

    # Model choice exposed to tools -> remote model identifier
    MODELS = {
        'flash': 'gemini-2.5-flash-image',
        'pro': 'gemini-3-pro-image-preview',
    }

    # None means no timeout: a hung request waits on the HTTP stack
    REQUEST_TIMEOUT_SEC = _optional_float('GEMINI_TIMEOUT_SEC')

    RATE_LIMIT_MESSAGE = (
        'Rate limit exceeded. Gemini image generation is limited to '
        '~2-5 requests per minute. Try again in a moment.'
    )

# Image file handling configuration
class ImageConfig:
    FILENAME_PREFIX = 'nano-banana'
    DEFAULT_OUTPUT_DIR = '.'
    DEFAULT_MIME_TYPE = 'image/png'
    MIME_TYPES = {
        '.png': 'image/png',
        '.jpg': 'image/jpeg',
        '.jpeg': 'image/jpeg',
        '.gif': 'image/gif',
        '.webp': 'image/webp',
        '.bmp': 'image/bmp',
    }
    # Schema bound for compose_images. The flash model handles ~9 in practice,
    # the remote service rejects anything it can't take.
    MAX_COMPOSE_IMAGES = 14
    DEFAULT_DESCRIBE_PROMPT = 'Describe this image in detail.'

def validate_config() -> list[str]:
    '''Return the names of required keys missing from the environment.'''
    return [key for key in REQUIRED_KEYS if not getattr(TokenKeys, key)]

def invalid_settings() -> list[str]:
    '''Return the names of optional settings that are set but not a positive number.'''
    return [
        name for name in POSITIVE_FLOAT_SETTINGS
        if os.getenv(name) and _parse_positive_float(os.getenv(name)) is None
    ]
