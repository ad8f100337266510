"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/categorizer.py
Maps file names to usage categories through a static extension table.
"""

import os
from types import MappingProxyType
from typing import Mapping, Tuple

from reclaimer.core.models import Category

CATEGORY_EXTENSIONS: Mapping[Category, Tuple[str, ...]] = MappingProxyType({
    Category.DOCUMENTS: (".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".xls", ".xlsx", ".ppt", ".pptx"),
    Category.IMAGES: (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico", ".tiff"),
    Category.VIDEOS: (".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm", ".m4v"),
    Category.AUDIO: (".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a"),
    Category.ARCHIVES: (".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".iso"),
    Category.EXECUTABLES: (".exe", ".msi", ".dll", ".sys", ".bat", ".cmd", ".ps1"),
    Category.CODE: (".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".cpp", ".c", ".cs", ".php",
                    ".html", ".css", ".json", ".xml"),
    Category.OTHER: (),
})

# Flattened lookup; the first category in declaration order claims an extension
_EXTENSION_INDEX: Mapping[str, Category] = MappingProxyType({
    ext: category
    for category in reversed(list(Category))
    for ext in CATEGORY_EXTENSIONS[category]
})


def categorize(filename: str) -> Category:
    """
    Returns the category of a file from its lowercase extension.
    Files without an extension (including dotfiles like ".bashrc") are OTHER.
    """
    _, ext = os.path.splitext(os.path.basename(filename))
    return _EXTENSION_INDEX.get(ext.lower(), Category.OTHER)
