"""ToolDefinition value object — what the model is told about a tool."""

from pydantic import BaseModel, Field


class ToolSchema(BaseModel, frozen=True):
    """JSON-schema object description of a tool's structured input."""

    properties: dict[str, object] = Field(default_factory=dict)
    required: frozenset[str] = frozenset()

    def to_json_schema(self) -> dict[str, object]:
        """Return the schema as a JSON-schema `object` document."""
        return {
            "type": "object",
            "properties": self.properties,
            "required": sorted(self.required),
        }


class ToolDefinition(BaseModel, frozen=True):
    """Name, description and input schema of one invocable tool."""

    name: str = Field(min_length=1)
    description: str = ""
    input_schema: ToolSchema = Field(default_factory=ToolSchema)
