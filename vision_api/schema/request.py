from typing import Literal

AttachmentType = Literal['image', 'thumbnail']
