from __future__ import annotations

import os
from copy import deepcopy
from collections.abc import Mapping

from PySubInterchange.SettingsType import SettingType, SettingsType
from PySubInterchange.SubtitleCue import CueDefaults, CuePosition, CueStyle

default_settings : dict[str, SettingType] = {
    'play_res_x': os.getenv('SUBTITLE_PLAY_RES_X', 1920),
    'play_res_y': os.getenv('SUBTITLE_PLAY_RES_Y', 1080),
    'script_title': os.getenv('SUBTITLE_SCRIPT_TITLE', "Exported Subtitles"),
    'default_font_family': "Arial",
    'default_font_size': 48,
    'default_color': "#ffffff",
    'default_background_color': "rgba(0, 0, 0, 0.5)",
    'default_text_align': "center",
    'default_text_shadow': "2px 2px 4px rgba(0, 0, 0, 0.8)",
    'default_position': {
        'x': 0.1,
        'y': 0.8,
        'width': 0.8,
        'height': 0.1,
        'rotation': 0.0,
        'scale_x': 1.0,
        'scale_y': 1.0,
    },
}

class Options:
    """
    Engine settings, initialised from the defaults and overridden by any provided values
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        self.settings : SettingsType = SettingsType(deepcopy(default_settings))
        if settings:
            self.settings.update(settings)
        self.settings.update(kwargs)

    @property
    def play_res_x(self) -> int:
        return self.settings.get_int('play_res_x', minimum=1) or 1920

    @property
    def play_res_y(self) -> int:
        return self.settings.get_int('play_res_y', minimum=1) or 1080

    @property
    def script_title(self) -> str:
        return self.settings.get_str('script_title') or ""

    def get(self, key : str, default : SettingType = None) -> SettingType:
        return self.settings.get(key, default)

    def cue_defaults(self) -> CueDefaults:
        """
        Build the default style and position applied to parsed cues
        """
        style = CueStyle(
            color=self.settings.get_str('default_color'),
            font_family=self.settings.get_str('default_font_family'),
            font_size=self.settings.get_float('default_font_size'),
            background_color=self.settings.get_str('default_background_color'),
            text_align=self.settings.get_str('default_text_align'),
            text_shadow=self.settings.get_str('default_text_shadow'),
        )
        position = CuePosition.from_dict(self.settings.get_rect('default_position'))
        return CueDefaults(style=style, position=position)
