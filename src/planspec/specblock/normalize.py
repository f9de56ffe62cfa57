"""Collapse duplicated SPECS_END markers left behind by racing writers."""

import re

from planspec.specblock import SPECS_END

_REPEATED_END = re.compile(r"^(?:" + re.escape(SPECS_END) + r")+")


def collapse_end_markers(after: str) -> str:
    """Reduce a leading run of SPECS_END markers to exactly one.

    Only back-to-back repeats are removed; anything separating two
    markers (even a newline) ends the run. Text not starting with
    SPECS_END is returned unchanged.
    """
    if not after.startswith(SPECS_END):
        return after
    tail = after[len(SPECS_END):]
    return SPECS_END + _REPEATED_END.sub("", tail)


def split_end_marker(after: str) -> str:
    """Return the text following the leading SPECS_END, if any."""
    if after.startswith(SPECS_END):
        return after[len(SPECS_END):]
    return after
