from .filesystem import FilesystemError, LocalFilesystem

__all__ = ["FilesystemError", "LocalFilesystem"]
