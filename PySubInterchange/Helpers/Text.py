import regex

_BLANK_LINE_PATTERN = regex.compile(r'\n[ \t]*\n')
_OVERRIDE_TAG_PATTERN = regex.compile(r'\{[^}]*\}')

def NormaliseLineEndings(text : str) -> str:
    """
    Convert CRLF and CR line endings to LF and drop a leading byte order mark
    """
    return text.lstrip('\ufeff').replace('\r\n', '\n').replace('\r', '\n')

def SplitBlocks(text : str) -> list[str]:
    """
    Split normalised text into blocks separated by one or more blank lines.
    Empty blocks are discarded.
    """
    blocks = _BLANK_LINE_PATTERN.split(text)
    return [block.strip('\n') for block in blocks if block.strip()]

def StripOverrideTags(text : str) -> str:
    """
    Remove ASS override tag blocks ({...}), leaving the surrounding text untouched
    """
    return _OVERRIDE_TAG_PATTERN.sub('', text)

def AssToPlainLineBreaks(text : str) -> str:
    """
    ASS hard (\\N) and soft (\\n) breaks become newlines
    """
    return text.replace('\\N', '\n').replace('\\n', '\n')

def PlainToAssLineBreaks(text : str) -> str:
    """
    Newlines become ASS hard breaks so that a cue stays on a single Dialogue line
    """
    return NormaliseLineEndings(text).replace('\n', '\\N')
