from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..dates import serialize
from ..domain import Candidate


class NormalizedDatePayload(BaseModel):
    input: str
    kind: str
    timestamp: str
    reference: str
    aligned_with: Optional[str] = None

    @classmethod
    def from_candidate(
        cls,
        text: str,
        candidate: Candidate,
        *,
        reference: datetime,
        aligned_with: Optional[datetime] = None,
    ) -> "NormalizedDatePayload":
        return cls(
            input=text,
            kind=candidate.kind.value,
            timestamp=serialize(candidate.instant),
            reference=serialize(reference),
            aligned_with=serialize(aligned_with) if aligned_with else None,
        )
