from .cleanup_service import CleanupService
from .duplicate_service import DuplicateService
from .file_service import FileService

__all__ = ["CleanupService", "DuplicateService", "FileService"]
