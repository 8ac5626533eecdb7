
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

class ConversationTurn(BaseModel):
    text: str = ""
    isUser: bool = False

class ChatContext(BaseModel):
    previousMessages: List[ConversationTurn] = Field(default_factory=list)

class ChatRequest(BaseModel):
    message: str = Field(..., description="Current user message")
    cars: List[Dict[str, Any]] = Field(default_factory=list, description="Vehicle inventory snapshot")
    context: Optional[ChatContext] = None

class Recommendations(BaseModel):
    type: Literal["cars", "parts"]
    items: List[Dict[str, Any]]
    title: str

class ChatResponse(BaseModel):
    response: str
    recommendations: Optional[Recommendations] = None

class ErrorResponse(BaseModel):
    error: str
