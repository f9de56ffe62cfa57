"""Required Specs block: the marker-delimited list inside a plan document.

A plan carries exactly one list of spec names, demarcated:
    <!-- SPECS_START -->
    - spec-one
    - spec-two
    <!-- SPECS_END -->

Anything outside these markers is preserved untouched. Writers append to
the list with an optimistic read/write/verify loop instead of a lock, so
several processes may merge into the same plan at once.
"""

# Marker constants used by locator, normalizer and merge
SPECS_START = "<!-- SPECS_START -->"
SPECS_END = "<!-- SPECS_END -->"

# Boundary used when SPECS_END is missing: a level-2 markdown heading
HEADING_BREAK = "\n## "

BULLET_PREFIX = "- "

DEFAULT_ATTEMPTS = 5
