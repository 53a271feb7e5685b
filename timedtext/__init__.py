from timedtext.captions import extract_captions
from timedtext.document import load_document
from timedtext.errors import (
    ConversionError, FormatError, TimestampParseError, UnsupportedVersionError,
)
from timedtext.models import Caption, RunState, StyledFragment
from timedtext.parser import TimedTextMarkupLanguageParser, convert_document
from timedtext.report import LoggingReporter, Reporter
from timedtext.srt import render_srt, write_srt
from timedtext.styles import build_style_table
from timedtext.timecode import adjust_time_zone_bias, format_srt_time, parse_ttml_time
