from .file_service import FileService
from .root_lock import RootLock

__all__ = ["FileService", "RootLock"]
