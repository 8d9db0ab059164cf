from typing import Literal, Optional
from pydantic import BaseModel


class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: Optional[str] = None


class SearchCriteria(BaseModel):
    subject: Optional[str] = None
    rating: Optional[float] = None
    keywords: Optional[str] = None

    def as_filter(self):
        """Only the fields that were actually extracted"""
        return self.model_dump(exclude_none=True)

    def is_empty(self):
        return not self.as_filter()


class MatchResult(BaseModel):
    id: str
    subject: str = ""
    stars: Optional[float] = None
    review: str = ""
