import logging

from timedtext.config import SRT_ENCODING
from timedtext.timecode import format_srt_time

logger = logging.getLogger(__name__)


def render_fragment(fragment):
    if fragment.color:
        return f'<font color="{fragment.color}">{fragment.text}</font>'
    return fragment.text


def render_srt(captions):
    """Render captions as SRT text, one numbered block per caption."""
    srt_entries = []
    for counter, caption in enumerate(captions, 1):
        lines = [
            str(counter),
            f"{format_srt_time(caption.begin)} --> {format_srt_time(caption.end)}",
        ]
        lines.extend(render_fragment(fragment) for fragment in caption.fragments)
        srt_entries.append('\n'.join(lines) + '\n\n')
    return ''.join(srt_entries)


def write_srt(captions, output_file):
    """Write captions to output_file in SRT format."""
    with open(output_file, 'w', encoding=SRT_ENCODING, newline='\n') as f:
        f.write(render_srt(captions))
    logger.info(f"Wrote {len(captions)} captions to {output_file}")
