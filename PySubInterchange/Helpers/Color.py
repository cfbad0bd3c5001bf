import regex

_HEX_COLOR_PATTERN = regex.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

class Color:
    """
    Simple RGB color representation.
    Supports conversion from #RRGGBB / #RGB and to the BGR ordering used by ASS.
    """

    def __init__(self, r : int, g : int, b : int):
        self.r = max(0, min(255, r))
        self.g = max(0, min(255, g))
        self.b = max(0, min(255, b))

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Color):
            return False

        return (self.r, self.g, self.b) == (value.r, value.g, value.b)

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b})"

    @property
    def is_white(self) -> bool:
        return (self.r, self.g, self.b) == (255, 255, 255)

    @classmethod
    def is_hex(cls, hex_str : str) -> bool:
        return bool(_HEX_COLOR_PATTERN.match(hex_str.strip()))

    @classmethod
    def from_hex(cls, hex_str : str) -> 'Color':
        """Create Color from #RRGGBB or #RGB format"""
        match = _HEX_COLOR_PATTERN.match(hex_str.strip())
        if not match:
            raise ValueError(f"Invalid hex color format: {hex_str}")

        digits = match.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)

        return cls(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16)
        )

    def to_hex(self) -> str:
        """Convert to #rrggbb format"""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_ass(self) -> str:
        """Convert to an ASS inline colour value, &HBBGGRR&"""
        return f"&H{self.b:02x}{self.g:02x}{self.r:02x}&"

    def to_ass_style(self, alpha : int = 0) -> str:
        """Convert to an ASS style colour value, &HAABBGGRR"""
        return f"&H{alpha:02X}{self.b:02X}{self.g:02X}{self.r:02X}"

def HexToAssColor(hex_color : str) -> str:
    """
    Convert an RGB hex colour to ASS BGR notation, e.g. '#FF0000' -> '&H0000ff&'.
    The bytes are reordered, not transformed.
    """
    return Color.from_hex(hex_color).to_ass()
