import base64
from pathlib import Path
from core.app_config import ImageConfig
from core.utils.time_utils import get_current_timestamp
from common.models import InlineData

def read_image_as_base64(file_path: str) -> InlineData:
    '''
        Read a local image and return it as an inline payload.
        The MIME type comes from the file extension only, unknown
        extensions are sent as image/png.
    '''
    path = Path(file_path)
    data = path.read_bytes()
    mime_type = ImageConfig.MIME_TYPES.get(path.suffix.lower(), ImageConfig.DEFAULT_MIME_TYPE)
    return InlineData(mime_type=mime_type, data=base64.b64encode(data).decode('ascii'))

def save_base64_image(data: str, output_dir: str) -> str:
    '''
        Decode a base64 image and write it as <prefix>-<epoch ms>.png in output_dir.
        Returns the written path. Always .png, whatever MIME type the service reported.
    '''
    filename = f'{ImageConfig.FILENAME_PREFIX}-{get_current_timestamp()}.png'
    filepath = Path(output_dir, filename)
    filepath.write_bytes(base64.b64decode(data))
    return str(filepath)
