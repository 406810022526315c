"""
Exceptions raised at the edges of the advisor (files, user input)
"""


class ModelAdvisorError(Exception):
    """Base class for advisor errors"""


class CatalogError(ModelAdvisorError):
    """A model catalog file could not be read or parsed"""


class HardwareProfileError(ModelAdvisorError):
    """A hardware profile could not be built from user-supplied data"""
