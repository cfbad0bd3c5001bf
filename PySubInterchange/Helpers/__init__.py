import os

from PySubInterchange.SubtitleData import SkippedBlock

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    Returns:
        str: Normalized path preserving original extension
        None: If filepath is None
    """
    if not filepath:
        return None
    return os.path.normpath(filepath)

def GetOutputPath(filepath : str|None, format_extension : str|None = None) -> str|None:
    """
    Generate an output path alongside the input file with the target format's extension.

    Args:
        filepath: Input file path to base output path on
        format_extension: Target format extension (e.g., '.ass', 'srt'). If None, keeps the input extension.

    Returns:
        str: Output path with format: "basename.extension", or "basename.converted.extension" if that would overwrite the input
        None: If filepath is None
    """
    if not filepath:
        return None

    directory = os.path.dirname(filepath)
    basename, current_extension = os.path.splitext(os.path.basename(filepath))

    if format_extension:
        target_extension = format_extension if format_extension.startswith('.') else f'.{format_extension}'
    else:
        target_extension = current_extension or '.srt'

    if target_extension.lower() == current_extension.lower():
        basename = f"{basename}.converted"

    output_path = os.path.join(directory, f"{basename}{target_extension}")
    return os.path.normpath(output_path)

def FormatSkippedBlocks(skipped : list[SkippedBlock]) -> str:
    """
    Summarise skipped blocks, one per line
    """
    return "\n".join(f"Block {block.number}: {block.reason}" for block in skipped)
