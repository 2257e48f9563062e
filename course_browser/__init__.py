"""
Top-level package for the course review browser.

Most code should import from submodules such as:
    course_browser.core
    course_browser.config
    course_browser.ui
"""

__all__: list[str] = []
