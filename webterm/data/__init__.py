"""
Built-in Data

Modules:
    projects: Project catalog and the seeded about text
"""

from webterm.data.projects import ABOUT_TEXT, PROJECTS

__all__ = ["ABOUT_TEXT", "PROJECTS"]
