from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class CreateRequest(BaseModel):
    # both optional so a missing prompt is answered with our own 400
    prompt: Optional[str] = None
    currentPage: Optional[str] = None


class CreateResponse(BaseModel):
    filename: str


class ErrorResponse(BaseModel):
    error: str


class ModelRequest(BaseModel):
    """Prompt for one edit, split into the system and user turns"""

    instructions: str
    user_input: str
    label: str

    def to_input(self) -> List[Dict[str, Any]]:
        """Render as a Responses API input list"""
        return [
            {
                "role": "system",
                "content": [{"type": "input_text", "text": self.instructions}],
            },
            {
                "role": "user",
                "content": [{"type": "input_text", "text": self.user_input}],
            },
        ]
