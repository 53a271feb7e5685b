import sys
import asyncio
import logging
from pathlib import Path

import aiofiles

from timedtext.config import LOG_FORMAT, PARSE_FAILED, SRT_ENCODING, WRITE_FAILED
from timedtext.parser import convert_document
from timedtext.report import LoggingReporter
from timedtext.srt import render_srt

logger = logging.getLogger(__name__)


async def ttml_to_srt(input_file, output_file=None, reporter=None):
    """Convert TTML subtitle file to SRT format."""
    reporter = reporter or LoggingReporter(logger)
    try:
        async with aiofiles.open(input_file, 'rb') as f:
            ttml_content = await f.read()
        state = convert_document(ttml_content)
    except Exception as e:
        reporter.report(PARSE_FAILED, e, f"File: {input_file}")
        return False

    if output_file is None:
        output_file = Path(input_file).with_suffix('.srt')

    try:
        async with aiofiles.open(output_file, 'w', encoding=SRT_ENCODING, newline='\n') as f:
            await f.write(render_srt(state.captions))
    except Exception as e:
        reporter.report(WRITE_FAILED, e, f"File: {output_file}")
        return False

    logger.info(f"Converted {input_file} -> {output_file} ({len(state.captions)} captions)")
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv or len(argv) > 2:
        print("usage: ttml2srt INPUT.ttml [OUTPUT.srt]", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    input_file = argv[0]
    output_file = argv[1] if len(argv) > 1 else None
    return 0 if asyncio.run(ttml_to_srt(input_file, output_file)) else 1


if __name__ == "__main__":
    sys.exit(main())
