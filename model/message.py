# model/message.py
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """
    Conversation message owned by the host chat app.
    Unknown fields are carried through untouched.
    `content` is accepted as any JSON value; only a plain string is text.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    from_: str = Field(alias="from")
    content: Any = ""

    @property
    def text(self) -> str | None:
        return self.content if isinstance(self.content, str) else None
