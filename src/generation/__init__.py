from .prompt import build_prompt
from .model import GenerationModel
from .client import GeminiGenerator

__all__ = ["GeminiGenerator", "GenerationModel", "build_prompt"]
