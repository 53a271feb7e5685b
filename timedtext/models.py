from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, Tuple


@dataclass(frozen=True)
class StyledFragment:
    """A run of caption text and its color ("" means no color override)."""
    text: str
    color: str = ""


@dataclass(frozen=True)
class Caption:
    """One cue: begin/end offsets into the media and its fragments in render order."""
    begin: timedelta
    end: timedelta
    fragments: Tuple[StyledFragment, ...] = ()


@dataclass
class RunState:
    """Style table and captions produced by one source document."""
    style_table: Dict[str, str] = field(default_factory=dict)
    captions: Tuple[Caption, ...] = ()

    def clear(self):
        self.style_table = {}
        self.captions = ()
