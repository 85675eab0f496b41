"""Content Summarizer: bounded preview string derived from an article body.

Invariants:
    - Bodies of at most PREVIEW_LENGTH characters are returned unchanged
    - Longer bodies yield exactly PREVIEW_LENGTH characters followed by ELLIPSIS
    - Length is counted in Unicode code points, never bytes, so a multi-byte
      character is never split

Design Decisions:
    - Pure function, no IO: used by article creation and version apply alike
"""

PREVIEW_LENGTH: int = 200
ELLIPSIS: str = "..."


def summarize(body: str) -> str:
    """Return the preview for body. Pure, never raises."""
    if len(body) <= PREVIEW_LENGTH:
        return body
    return body[:PREVIEW_LENGTH] + ELLIPSIS
