from enum import Enum

class ResponseModality(Enum):
    TEXT = 'TEXT'
    IMAGE = 'IMAGE'

class ContentType(Enum):
    TEXT = 'text'
    IMAGE = 'image'
