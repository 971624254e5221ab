"""
Thumbnail derivation strategies

No provider returns a thumbnail, so one is derived from the video URL.
The default swaps the file extension, which works for hosts that publish
a same-named still next to each video.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ThumbnailStrategy(ABC):

    @abstractmethod
    def derive(self, video_url: str) -> Optional[str]:
        pass


class ExtensionSwapThumbnail(ThumbnailStrategy):
    """Replace the first `.mp4` in the URL with `.jpg`"""

    def __init__(self, video_extension: str = ".mp4", image_extension: str = ".jpg"):
        self.video_extension = video_extension
        self.image_extension = image_extension

    def derive(self, video_url: str) -> Optional[str]:
        if not isinstance(video_url, str) or self.video_extension not in video_url:
            return None
        return video_url.replace(self.video_extension, self.image_extension, 1)
