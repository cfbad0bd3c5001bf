import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySubInterchange.Options import Options
from PySubInterchange.SubtitleFileHandler import default_encoding, fallback_encoding
from PySubInterchange.SubtitleFormatRegistry import SubtitleFormatRegistry

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(logfilename: str, debug: bool = False, log_dir: str|None = None) -> LoggerOptions:
    """ Initialise the console logger, and a file handler if a log directory is given """
    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    if not log_dir:
        return LoggerOptions(file_handler=None, log_path=None)

    log_path = os.path.join(log_dir, f"{logfilename}.log")
    file_handler = None
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create new arg parser with the arguments shared by the conversion scripts
    """
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    if pre_args.list_formats:
        HandleFormatListing(pre_args)

    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path to subtitle file (see --list-formats for supported formats)")
    parser.add_argument('-o', '--output', help="Output subtitle file path; format inferred from extension unless --to is given")
    parser.add_argument('-f', '--format', type=str, default=None, help="Format of the input file, detected from the content if omitted")
    parser.add_argument('-t', '--to', type=str, default=None, help="Format to convert to (srt, vtt or ass)")
    parser.add_argument('--width', type=int, default=None, help="Video width, written as PlayResX in ASS output")
    parser.add_argument('--height', type=int, default=None, help="Video height, written as PlayResY in ASS output")
    parser.add_argument('--title', type=str, default=None, help="Script title for ASS output")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('--logdir', type=str, default=None, help="Directory to write a log file to")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.list_available_formats()
        if formats:
            print(f"Supported subtitle formats: {formats}")
            print(f"Supported file extensions: {', '.join(SubtitleFormatRegistry.enumerate_extensions())}")
        else:
            print("No subtitle formats available.")
        raise SystemExit(0)

def CreateOptions(args: Namespace) -> Options:
    """ Create engine options from the command line arguments """
    settings = {
        'script_title': args.title,
    }
    return Options(settings)

def ReadSubtitleFile(path : str) -> str:
    """
    Read a subtitle file, retrying with the fallback encoding if it is not valid in the default encoding
    """
    try:
        with open(path, 'r', encoding=default_encoding) as f:
            return f.read()
    except UnicodeDecodeError:
        logging.warning(f"Unable to read {path} as {default_encoding}, retrying with {fallback_encoding}")
        with open(path, 'r', encoding=fallback_encoding) as f:
            return f.read()

def GetTargetFormat(args: Namespace) -> str:
    """
    Determine the output format from --to or the extension of --output
    """
    if args.to:
        return args.to.lower()

    if args.output:
        extension = SubtitleFormatRegistry.get_format_from_filename(args.output)
        if extension:
            return SubtitleFormatRegistry.get_handler_by_extension(extension).FORMAT

    raise ValueError("Output format cannot be determined, specify --to or an output path with a subtitle extension")
