import importlib
import inspect
import logging
import os
import pkgutil
from pathlib import Path

from PySubInterchange.Options import Options
from PySubInterchange.SubtitleError import UnsupportedFormatError
from PySubInterchange.SubtitleFileHandler import SubtitleFileHandler
from PySubInterchange.SubtitleFormatDetector import UNKNOWN_FORMAT, SubtitleFormatDetector


class SubtitleFormatRegistry:
    """
    Manages discovery and lookup of subtitle file handlers.

    Uses lazy discovery to find all concrete subclasses of SubtitleFileHandler in the Formats package.
    Handlers are registered by format name and by their supported file extensions and priorities.
    """
    _formats : dict[str, type[SubtitleFileHandler]] = {}
    _handlers : dict[str, type[SubtitleFileHandler]] = {}
    _priorities : dict[str, int] = {}
    _discovered : bool = False

    @classmethod
    def register_handler(cls, handler_class : type[SubtitleFileHandler]) -> None:
        """
        Register a subtitle file handler class for its format and supported extensions.
        """
        if handler_class.FORMAT:
            cls._formats[handler_class.FORMAT.lower()] = handler_class

        for ext, priority in handler_class.SUPPORTED_EXTENSIONS.items():
            ext = ext.lower()
            if ext not in cls._handlers or priority >= cls._priorities[ext]:
                cls._handlers[ext] = handler_class
                cls._priorities[ext] = priority

    @classmethod
    def get_handler_by_format(cls, format : str) -> type[SubtitleFileHandler]:
        """
        Get the subtitle file handler class for a format name (e.g. 'srt')
        """
        cls._ensure_discovered()
        name = str(format).lower()
        if name not in cls._formats:
            raise UnsupportedFormatError(f"Unsupported subtitle format: {format}. Available formats: {cls.list_available_formats()}", format)
        return cls._formats[name]

    @classmethod
    def get_handler_by_extension(cls, extension : str) -> type[SubtitleFileHandler]:
        """
        Get the subtitle file handler class for the given extension.
        """
        cls._ensure_discovered()
        ext = extension.lower()
        if ext not in cls._handlers:
            raise UnsupportedFormatError(f"Unknown subtitle file extension: {extension}. Available extensions: {', '.join(cls.enumerate_extensions())}", extension)
        return cls._handlers[ext]

    @classmethod
    def create_handler(cls, format : str|None = None, filename : str|None = None, options : Options|None = None) -> SubtitleFileHandler:
        """
        Instantiate a subtitle file handler for the given format, or for the extension of filename.
        """
        if format:
            handler_cls = cls.get_handler_by_format(format)
        elif filename:
            extension = cls.get_format_from_filename(filename)
            if not extension:
                raise UnsupportedFormatError(f"Format cannot be deduced from filename '{filename}'. Available formats: {cls.list_available_formats()}")
            handler_cls = cls.get_handler_by_extension(extension)
        else:
            raise UnsupportedFormatError(f"No subtitle format specified. Available formats: {cls.list_available_formats()}")

        return handler_cls(options=options)

    @classmethod
    def enumerate_formats(cls) -> list[str]:
        """
        List all supported subtitle format names.
        """
        cls._ensure_discovered()
        return sorted(cls._formats.keys())

    @classmethod
    def enumerate_extensions(cls) -> list[str]:
        """
        List all supported subtitle file extensions.
        """
        cls._ensure_discovered()
        return sorted(cls._handlers.keys())

    @classmethod
    def list_available_formats(cls) -> str:
        """
        Get a comma-separated string of all supported subtitle formats.
        """
        formats = cls.enumerate_formats()
        return "None" if not formats else ", ".join(formats)

    @classmethod
    def disable_autodiscovery(cls) -> None:
        """ Disable automatic discovery of subtitle formats (for testing) """
        cls.clear()
        cls._discovered = True

    @classmethod
    def enable_autodiscovery(cls) -> None:
        """ Enable automatic discovery of subtitle formats (for testing) """
        cls._discovered = False

    @classmethod
    def discover(cls) -> None:
        """
        Discover and register all subtitle file handlers in the Formats package.
        """
        package_path = Path(__file__).parent / "Formats"
        for _, module_name, _ in pkgutil.iter_modules([str(package_path)]):
            module = importlib.import_module(f"PySubInterchange.Formats.{module_name}")
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, SubtitleFileHandler) and obj is not SubtitleFileHandler and not inspect.isabstract(obj):
                    cls.register_handler(obj)
        cls._discovered = True

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered handlers
        """
        cls._formats.clear()
        cls._handlers.clear()
        cls._priorities.clear()
        cls._discovered = False

    @classmethod
    def get_format_from_filename(cls, filename : str) -> str|None:
        """
        Deduce subtitle file extension from a filename
        """
        base, extension = os.path.splitext(filename) # type: ignore[ignore-unused]
        return extension.lower() if extension else None

    @classmethod
    def detect_format(cls, content : str) -> str:
        """
        Detect the subtitle format of content. Returns 'unknown' if it cannot be identified
        or no handler is registered for it.
        """
        cls._ensure_discovered()
        detected = SubtitleFormatDetector().detect(content)
        if detected == UNKNOWN_FORMAT:
            return UNKNOWN_FORMAT

        if detected not in cls._formats:
            logging.warning(f"Detected subtitle format '{detected}' is not supported")
            return UNKNOWN_FORMAT

        logging.info(f"Detected subtitle format '{detected}'")
        return detected

    @classmethod
    def get_mime_type(cls, format : str) -> str:
        """
        MIME type for a format, 'text/plain' if the format is unknown
        """
        cls._ensure_discovered()
        handler_cls = cls._formats.get(str(format).lower())
        return handler_cls.MIME_TYPE if handler_cls else 'text/plain'

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()
