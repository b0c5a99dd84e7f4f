from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field

from ..core.schema import DetailResult, NormalizedItem, SearchHit


class GraphState(BaseModel):
    input: Dict[str, Any]
    hits: List[SearchHit] = Field(default_factory=list)
    items: List[NormalizedItem] = Field(default_factory=list)
    selected: Optional[NormalizedItem] = None
    detail: Optional[DetailResult] = None
    errors: List[str] = Field(default_factory=list)
