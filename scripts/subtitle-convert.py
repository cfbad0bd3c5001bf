import logging

from interchange_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
    GetTargetFormat,
    ReadSubtitleFile,
)

from PySubInterchange import export_subtitles, parse_subtitle_data
from PySubInterchange.Helpers import FormatSkippedBlocks, GetInputPath, GetOutputPath
from PySubInterchange.SubtitleData import SubtitleData

parser = CreateArgParser("Converts subtitles between SRT, WebVTT and ASS formats")
args = parser.parse_args()

logger_options = InitLogger("subtitle-convert", args.debug, args.logdir)

try:
    input_path = GetInputPath(args.input)
    options = CreateOptions(args)
    target_format = GetTargetFormat(args)
    output_path = args.output or GetOutputPath(input_path, target_format)

    content = ReadSubtitleFile(input_path)
    data : SubtitleData = parse_subtitle_data(content, args.format, options=options)

    logging.info(f"Read {len(data.cues)} cues from {input_path} ({data.detected_format})")
    if data.skipped:
        logging.info(f"Skipped blocks:\n{FormatSkippedBlocks(data.skipped)}")

    output = export_subtitles(data.cues, target_format, args.width, args.height, options=options)

    with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(output)

    logging.info(f"Wrote {len(data.cues)} cues to {output_path} ({target_format})")

except Exception as e:
    print("Error:", e)
    raise
