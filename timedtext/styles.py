import logging

from timedtext.config import TT_NAMESPACE, TTS_NAMESPACE, XML_NAMESPACE
from timedtext.document import get_ns_attribute, qualified

logger = logging.getLogger(__name__)


def build_style_table(document):
    """Build a map of style id -> color from the tt:style elements."""
    style_table = {}
    for style in document.find_all(qualified(TT_NAMESPACE, 'style')):
        style_id = get_ns_attribute(style, XML_NAMESPACE, 'id')
        color = get_ns_attribute(style, TTS_NAMESPACE, 'color')
        if style_id is not None and color is not None:
            style_table[style_id] = color

    logger.debug(f"Indexed {len(style_table)} colored styles")
    return style_table
