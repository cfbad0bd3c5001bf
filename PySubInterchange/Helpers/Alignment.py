from PySubInterchange.SubtitleCue import CuePosition

# ASS numeric keypad layout, bottom row first
_ALIGNMENT_ROWS = {
    'bottom': (1, 2, 3),
    'middle': (4, 5, 6),
    'top': (7, 8, 9),
}

_LOWER_THRESHOLD = 0.33
_UPPER_THRESHOLD = 0.66

def GetAlignmentBucket(position : CuePosition|None) -> int:
    """
    Map a normalised cue position onto the 3x3 ASS alignment grid (1-9).

    The centre of the cue rectangle picks the column (left/centre/right) and the row (top/middle/bottom).
    Cues without a position are bottom-centre (2).
    """
    if position is None:
        return 2

    x, y = position.center

    if x < _LOWER_THRESHOLD:
        column = 0
    elif x < _UPPER_THRESHOLD:
        column = 1
    else:
        column = 2

    if y < _LOWER_THRESHOLD:
        row = 'top'
    elif y < _UPPER_THRESHOLD:
        row = 'middle'
    else:
        row = 'bottom'

    return _ALIGNMENT_ROWS[row][column]
