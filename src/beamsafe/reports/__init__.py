from .summary import build_image_prompt, build_summary
