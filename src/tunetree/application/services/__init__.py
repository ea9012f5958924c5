from .library_service import BuildLibraryRequest, LibraryService, build_library

__all__ = ["BuildLibraryRequest", "LibraryService", "build_library"]
