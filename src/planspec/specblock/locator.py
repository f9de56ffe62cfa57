"""Locate the Required Specs section inside a plan document."""

from __future__ import annotations

from dataclasses import dataclass

from planspec.specblock import HEADING_BREAK, SPECS_END, SPECS_START


@dataclass(frozen=True)
class Section:
    """A lossless three-way split of a document around the specs list.

    ``before`` ends with SPECS_START, ``after`` starts with SPECS_END (or
    with the recovered boundary when the end marker was lost), ``middle``
    is everything in between.
    """

    before: str
    middle: str
    after: str

    def join(self) -> str:
        return self.before + self.middle + self.after


def find_section(content: str) -> Section | None:
    """Split ``content`` around its specs list.

    Returns None when SPECS_START is absent. When SPECS_END is missing
    after the start marker, the list is assumed to run until the next
    ``## `` heading, or to the end of the document if there is none.
    """
    start = content.find(SPECS_START)
    if start == -1:
        return None

    body_start = start + len(SPECS_START)
    before = content[:body_start]

    end = content.find(SPECS_END, body_start)
    if end != -1:
        return Section(before, content[body_start:end], content[end:])

    heading = content.find(HEADING_BREAK, body_start)
    boundary = heading if heading != -1 else len(content)
    return Section(before, content[body_start:boundary], content[boundary:])
