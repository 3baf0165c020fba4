"""
Prompt templates for slide image generation.
Every request gets the same style guide plus one complexity instruction
picked from the detail level slider (0-100).
"""

from typing import Any

from slidestudio.config import settings

MINIMAL_INSTRUCTION = (
    "DESIGN LEVEL: EXTREMELY MINIMAL. Use very few elements. Focus on empty space, "
    "single bold typography, and abstract primitives. No background noise."
)

BALANCED_INSTRUCTION = (
    "DESIGN LEVEL: BALANCED. Standard professional presentation mix of clarity and "
    "visual interest. Clean layout with sufficient data visualization."
)

HIGH_FIDELITY_INSTRUCTION = (
    "DESIGN LEVEL: HIGH FIDELITY / DETAILED. Rich visual data density, intricate UI "
    "components, layered depth effects, subtle background textures, and comprehensive "
    "diagramming."
)

STYLE_GUIDE_TEMPLATE = """
STYLE GUIDE & DESIGN SYSTEM:
- Aesthetic: Ultra-clean, modern corporate tech, minimalistic, dark mode.
- Color Palette: Deep blue/black background, accents in electric blue, light blue, and white. NO purple, NO neon pink.
- Typography: Sans-serif, bold headers, clean body text.
- Visuals: Simple geometric forms, clean lines, data visualizations. AVOID clutter, avoid complex 3D renders, avoid noise.
- Layout: spacious, organized, grid-based.
- Branding: DO NOT include any specific logos or brand names. Keep it generic and clean.
- {complexity_instruction}

INSTRUCTIONS:
Create a professional presentation slide based on the user's idea.
STRICTLY follow the style guide above.
The slide must look like a finished, high-fidelity design export, not a draft.
Ensure text is legible.
Do NOT add any logos.
"""


def resolve_detail_level(detail_level: Any) -> float:
    """Return the numeric detail level, or the configured default for anything non-numeric."""
    if isinstance(detail_level, bool) or not isinstance(detail_level, (int, float)):
        return settings.DEFAULT_DETAIL_LEVEL
    return detail_level


def select_complexity_instruction(detail_level: Any) -> str:
    """Map a 0-100 detail level onto one of the three complexity instructions."""
    level = resolve_detail_level(detail_level)
    if level < 30:
        return MINIMAL_INSTRUCTION
    if level > 70:
        return HIGH_FIDELITY_INSTRUCTION
    return BALANCED_INSTRUCTION


def get_style_guide(detail_level: Any) -> str:
    return STYLE_GUIDE_TEMPLATE.format(
        complexity_instruction=select_complexity_instruction(detail_level)
    )


def build_slide_prompt(prompt: str, detail_level: Any = None) -> str:
    """Combine the style guide with the user's slide idea."""
    return f"{get_style_guide(detail_level)}\n\nUSER SLIDE IDEA:\n{prompt}"
