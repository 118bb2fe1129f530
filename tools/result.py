"""Result envelope returned for every tool invocation."""

from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(frozen=True)
class TextContent:
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class ImageContent:
    """Base64 image block. Defined by MCP; none of our tools emit it."""

    data: str
    mime_type: str
    type: Literal["image"] = "image"


ContentBlock = Union[TextContent, ImageContent]


@dataclass
class ToolResult:
    """Uniform envelope: an ordered list of content blocks."""

    tool_name: str
    content: list[ContentBlock] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, tool_name: str, text: str, *, is_error: bool = False) -> "ToolResult":
        return cls(tool_name=tool_name, content=[TextContent(text=text)], is_error=is_error)

    @property
    def first_text(self) -> str:
        for block in self.content:
            if isinstance(block, TextContent):
                return block.text
        return ""
