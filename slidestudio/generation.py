import logging
from typing import Any

from slidestudio.image_providers import image_manager
from slidestudio.prompts import build_slide_prompt, resolve_detail_level, select_complexity_instruction
from slidestudio.slide_store import derive_slide_filename, save_slide_image, today_partition

logger = logging.getLogger(__name__)


def generate_slide(prompt: str, detail_level: Any = None) -> str:
    """Generate one slide image for ``prompt`` and return its public URL.

    The filename is derived from the user's prompt, not the styled one.
    """
    level = resolve_detail_level(detail_level)
    final_prompt = build_slide_prompt(prompt, level)
    tier = select_complexity_instruction(level).split(".")[0]
    logger.info(f"Generating slide (detail {level}, {tier}): {prompt[:80]!r}")

    image = image_manager.generate_image(final_prompt)

    filename = derive_slide_filename(prompt)
    url = save_slide_image(image.data, filename, today_partition())
    logger.info(f"Slide generated: {url}")
    return url
