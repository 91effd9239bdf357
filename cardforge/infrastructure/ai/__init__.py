from .completion_client import CompletionClient
from .output_repair import repair_and_validate

__all__ = ["CompletionClient", "repair_and_validate"]
