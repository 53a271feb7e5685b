import logging
from pathlib import Path

from timedtext.captions import extract_captions
from timedtext.config import PARSE_FAILED, WRITE_FAILED
from timedtext.document import load_document
from timedtext.models import RunState
from timedtext.report import LoggingReporter
from timedtext.srt import write_srt
from timedtext.styles import build_style_table

logger = logging.getLogger(__name__)


def convert_document(data):
    """Run the loader, style indexer and caption extractor on raw TTML bytes.

    Returns a new RunState. Any ConversionError propagates to the caller.
    """
    document = load_document(data)
    style_table = build_style_table(document)
    captions = extract_captions(document, style_table)
    return RunState(style_table=style_table, captions=tuple(captions))


class TimedTextMarkupLanguageParser:
    """Converter for EBU-TT v1.0 TTML subtitle files into SubRip Text format.

    parse() and to_srt() never raise; failures go to the reporter and the
    call returns False. One instance can be reused across files, each parse
    starts from an empty run state.
    """

    def __init__(self, reporter=None):
        self.reporter = reporter or LoggingReporter()
        self.state = RunState()

    @property
    def style_table(self):
        return dict(self.state.style_table)

    @property
    def captions(self):
        return self.state.captions

    def parse(self, ttml_file):
        """Parse the TTML file into the internal representation."""
        self.state = RunState()
        try:
            with open(ttml_file, 'rb') as f:
                data = f.read()
            self.state = convert_document(data)
        except Exception as e:
            self.reporter.report(PARSE_FAILED, e, f"File: {ttml_file}")
            return False

        logger.info(f"Parsed {len(self.state.captions)} captions from {Path(ttml_file).name}")
        return True

    def to_srt(self, srt_file):
        """Save the parsed captions to srt_file in SubRip Text format."""
        try:
            write_srt(self.state.captions, srt_file)
        except Exception as e:
            self.reporter.report(WRITE_FAILED, e, f"File: {srt_file}")
            return False
        return True

    def cleanup(self):
        self.state.clear()
