from typing import Optional

from pydantic import BaseModel, Field

PROTOCOL_VERSION = "1"

PROTOCOL_VERSION_COMMAND = "protocol-version"
CONNECT_COMMAND = "connect"


class OneLineRequest(BaseModel):
    """A single newline-terminated request as sent by a game client."""

    tokens: list[str] = Field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "OneLineRequest":
        return cls(tokens=line.split())

    @property
    def is_single_token(self) -> bool:
        return len(self.tokens) == 1

    @property
    def command(self) -> Optional[str]:
        """The command name, or None when the line is not exactly one token."""
        if not self.is_single_token:
            return None
        return self.tokens[0]
