from pydantic import BaseModel
from typing import Literal, Optional

# --- fact check API ---

class FactCheckRequest(BaseModel):
    # either field may be missing; fact_checker decides which one is used
    url: Optional[str] = None
    title: Optional[str] = None


class Verdict(BaseModel):
    status: Literal["True", "False", "Suspicious"]
    explanation: str


# --- errors ---

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
