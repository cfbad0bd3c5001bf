class SubtitleError(Exception):
    """
    Base class for errors raised by the subtitle interchange engine
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.message:
            return self.message
        elif self.error:
            return str(self.error)
        return super().__str__()

class SubtitleParseError(SubtitleError):
    """
    Content could not be parsed in the expected format
    """
    pass

class MalformedTimecodeError(SubtitleParseError):
    """
    A timecode did not match the pattern for its format.
    Parsers catch this for each block and skip the block.
    """
    def __init__(self, message : str, timecode : str|None = None):
        super().__init__(message)
        self.timecode : str|None = timecode

class UnsupportedFormatError(SubtitleError):
    """
    The requested or detected format is not one the engine can read or write
    """
    def __init__(self, message : str, format : str|None = None):
        super().__init__(message)
        self.format : str|None = format
