from pathlib import Path
from typing import Optional


def build_image_url(base_url: str, image_id: str) -> str:
    """Public URL of the rendered image attachment, as served by the media router."""
    return f"{base_url.rstrip('/')}/images/image/{image_id}.jpg"


class MediaService:
    def __init__(self, media_folder: str):
        self.media_folder = Path(media_folder)

    def attachment_path(self, document_id: str, attachment_type: str) -> Optional[Path]:
        # ids come from the URL, refuse anything that could leave the media folder
        if not document_id or Path(document_id).name != document_id or document_id in ('.', '..'):
            return None
        p = self.media_folder / document_id / f'{attachment_type}.jpg'
        if not p.is_file():
            return None
        return p
