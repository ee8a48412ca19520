class ExtentPickerError(Exception):
    """Base exception for extentpicker"""
    pass

class InvalidArgument(ExtentPickerError, ValueError):
    """Raised when a resolution, precision or extent argument is not valid"""
    pass

class DatasetLoadFailed(ExtentPickerError, RuntimeError):
    """Raised when the world map dataset cannot be downloaded or read"""
    pass

class CaptureFailed(ExtentPickerError, RuntimeError):
    """Raised when two click points could not be captured from the map"""
    pass
