"""Display configuration model."""

from pydantic import BaseModel


class DisplayConfig(BaseModel, frozen=True):
    hide_tool_results: bool = False
