class CourseBrowserError(Exception):
    """Base exception for all course_browser errors"""
    pass

class ConfigError(CourseBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class CatalogSchemaError(CourseBrowserError):
    """
    A catalog record doesn't match what Course expects:
    missing id/name, negative review count, stats out of range, duplicate ids
    """
    pass
