from __future__ import annotations

from copy import deepcopy
from typing import Any


class CueStyle:
    """
    Presentation hints attached to a cue by the editor's style catalog.

    Only `color` affects export (as an inline ASS colour tag), the other fields are carried through unchanged.
    """
    FIELDS : dict[str, str] = {
        'color': 'color',
        'font_family': 'fontFamily',
        'font_size': 'fontSize',
        'background_color': 'backgroundColor',
        'text_align': 'textAlign',
        'text_shadow': 'textShadow',
    }

    def __init__(self, color : str|None = None, font_family : str|None = None, font_size : int|float|None = None,
                 background_color : str|None = None, text_align : str|None = None, text_shadow : str|None = None):
        self.color : str|None = color
        self.font_family : str|None = font_family
        self.font_size : int|float|None = font_size
        self.background_color : str|None = background_color
        self.text_align : str|None = text_align
        self.text_shadow : str|None = text_shadow

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, CueStyle):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"CueStyle({fields})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict with snake_case keys, omitting unset fields"""
        return { field: getattr(self, field) for field in self.FIELDS if getattr(self, field) is not None }

    @classmethod
    def from_dict(cls, values : dict[str, Any]) -> CueStyle:
        """
        Create from a property bag, accepting either snake_case or camelCase keys
        """
        kwargs = {}
        for field, camel_name in cls.FIELDS.items():
            if field in values:
                kwargs[field] = values[field]
            elif camel_name in values:
                kwargs[field] = values[camel_name]
        return cls(**kwargs)


class CuePosition:
    """
    Normalised rectangle (0..1 in both axes) locating a cue on the video frame
    """
    def __init__(self, x : float = 0.0, y : float = 0.0, width : float = 1.0, height : float = 1.0,
                 rotation : float = 0.0, scale_x : float = 1.0, scale_y : float = 1.0):
        self.x : float = x
        self.y : float = y
        self.width : float = width
        self.height : float = height
        self.rotation : float = rotation
        self.scale_x : float = scale_x
        self.scale_y : float = scale_y

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, CuePosition):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"CuePosition(x={self.x}, y={self.y}, width={self.width}, height={self.height})"

    def to_dict(self) -> dict[str, float]:
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'rotation': self.rotation,
            'scale_x': self.scale_x,
            'scale_y': self.scale_y,
        }

    @classmethod
    def from_dict(cls, values : dict[str, Any]) -> CuePosition:
        return cls(
            x=float(values.get('x', 0.0)),
            y=float(values.get('y', 0.0)),
            width=float(values.get('width', 1.0)),
            height=float(values.get('height', 1.0)),
            rotation=float(values.get('rotation', 0.0)),
            scale_x=float(values.get('scale_x', values.get('scaleX', 1.0))),
            scale_y=float(values.get('scale_y', values.get('scaleY', 1.0))),
        )


class Cue:
    """
    One timed text entry, the canonical unit exchanged with parsers and exporters.

    Attributes:
        start_time (float): Offset from the start of the media in seconds (>= 0)
        duration (float): Display duration in seconds (> 0)
        text (str): Plain text with markup removed, lines separated by '\\n'
        style (CueStyle|None): Optional presentation hints
        position (CuePosition|None): Optional normalised placement
    """
    def __init__(self, start_time : float, duration : float, text : str, style : CueStyle|None = None, position : CuePosition|None = None):
        if start_time < 0:
            raise ValueError(f"Cue start time must not be negative: {start_time}")
        if duration <= 0:
            raise ValueError(f"Cue duration must be positive: {duration}")

        self.start_time : float = float(start_time)
        self.duration : float = float(duration)
        self.text : str = text
        self.style : CueStyle|None = style
        self.position : CuePosition|None = position

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    @classmethod
    def FromTimes(cls, start_time : float, end_time : float, text : str, style : CueStyle|None = None, position : CuePosition|None = None) -> Cue:
        """
        Construct a cue from start and end times rather than a duration
        """
        return cls(start_time, end_time - start_time, text, style=style, position=position)

    def __repr__(self) -> str:
        return f"Cue(start_time={self.start_time}, duration={self.duration}, text={self.text!r})"

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Cue):
            return False
        return (self.start_time, self.duration, self.text, self.style, self.position) == \
               (other.start_time, other.duration, other.text, other.style, other.position)


class CueDefaults:
    """
    Default style and position stamped on every parsed cue.

    Handlers receive an instance at construction, so defaults can vary per call site
    without changing the parsers.
    """
    def __init__(self, style : CueStyle, position : CuePosition):
        self.style : CueStyle = style
        self.position : CuePosition = position

    def CreateCue(self, start_time : float, end_time : float, text : str) -> Cue:
        """
        Create a cue carrying independent copies of the default style and position
        """
        return Cue.FromTimes(start_time, end_time, text, style=deepcopy(self.style), position=deepcopy(self.position))
