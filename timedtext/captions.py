import logging
from datetime import timedelta

from bs4 import Tag

from timedtext.config import TT_NAMESPACE
from timedtext.document import qualified
from timedtext.models import Caption, StyledFragment
from timedtext.timecode import adjust_time_zone_bias, parse_ttml_time

logger = logging.getLogger(__name__)

# Cues without begin/end become zero length cues at the start of the media
MISSING_TIME = timedelta(0)

is_span = qualified(TT_NAMESPACE, 'span')


def _cue_times(cue):
    begin = cue.get('begin')
    end = cue.get('end')
    if begin is None or end is None:
        logger.warning(f"Cue without begin/end, using {MISSING_TIME}")
        return MISSING_TIME, MISSING_TIME
    return (adjust_time_zone_bias(parse_ttml_time(begin)),
            adjust_time_zone_bias(parse_ttml_time(end)))


def _fragment(span, style_table):
    style = span.get('style')
    color = style_table.get(style, "") if style is not None else ""
    if style is not None and style not in style_table:
        logger.warning(f"Span references unknown style {style!r}, leaving it uncolored")
    return StyledFragment(text=span.get_text(), color=color)


def extract_captions(document, style_table):
    """Build the Caption list from the tt:p elements, in document order.

    style_table must be complete before this runs. A malformed begin/end
    raises TimestampParseError and no captions are returned.
    """
    captions = []
    for cue in document.find_all(qualified(TT_NAMESPACE, 'p')):
        begin, end = _cue_times(cue)
        fragments = tuple(
            _fragment(child, style_table)
            for child in cue.children
            if isinstance(child, Tag) and is_span(child)
        )
        captions.append(Caption(begin=begin, end=end, fragments=fragments))

    logger.debug(f"Extracted {len(captions)} captions")
    return captions
