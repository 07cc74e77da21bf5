

class GalleryError(Exception):
    """Base exception for all tools_gallery errors"""
    pass

class ConfigError(GalleryError):
    """Invalid or inconsistent global.json"""
    pass

class CatalogSourceError(GalleryError):
    """
    A catalog source could not produce the raw dataset text:
    unreachable host, non-success status, unreadable or empty file, etc
    """
    pass
