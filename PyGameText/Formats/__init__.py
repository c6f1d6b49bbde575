from PyGameText.Formats.SubtitleJsonHandler import SubtitleJsonHandler
from PyGameText.Formats.TextJsonHandler import TextJsonHandler

__all__ = [
    'SubtitleJsonHandler',
    'TextJsonHandler',
]
