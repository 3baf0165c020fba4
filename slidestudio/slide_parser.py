"""
Split a blob of pasted slide ideas into one prompt per slide.

Recognised headers look like any of:
    Slide 1:
    #### Slide 1:
    * **Slide 1:**
    > Slide 1 - Title
"""

import re
from typing import List

SLIDE_HEADER_PATTERN = re.compile(r"^(?:[#\s*>-]*)Slide\s+\d+", re.IGNORECASE)
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n[ \t]*\n")


def is_slide_header(line: str) -> bool:
    return bool(SLIDE_HEADER_PATTERN.match(line.strip()))


def _split_on_headers(lines: List[str]) -> List[str]:
    slides = []
    buffer = ""
    found_first_header = False

    for line in lines:
        if is_slide_header(line):
            found_first_header = True
            if buffer.strip():
                slides.append(buffer.strip())
            buffer = line + "\n"
        elif found_first_header:
            buffer += line + "\n"
        # Lines before the first header are preamble and dropped

    if buffer.strip():
        slides.append(buffer.strip())

    return slides


def parse_slides(text: str) -> List[str]:
    """Return the slide prompts found in ``text``, in order.

    Header-delimited blocks win. Without headers, blank-line separated
    paragraphs are used, and failing that every non-empty line is a slide.
    """
    if not text:
        return []

    text = text.replace("\r\n", "\n")
    lines = text.split("\n")

    slides = _split_on_headers(lines)
    if slides:
        return slides

    if PARAGRAPH_BREAK_PATTERN.search(text):
        paragraphs = [p.strip() for p in PARAGRAPH_BREAK_PATTERN.split(text)]
        paragraphs = [p for p in paragraphs if p]
        if paragraphs:
            return paragraphs

    return [line.strip() for line in lines if line.strip()]
