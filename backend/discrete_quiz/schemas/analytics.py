"""Cross-submission analytics schemas."""

import uuid

from pydantic import BaseModel


class TopicPerformance(BaseModel):
    topic_id: uuid.UUID
    topic_name: str | None = None
    average_performance: float
    submissions: int  # how many submissions covered this topic


class DifficultyDistribution(BaseModel):
    Basic: int = 0
    Intermediate: int = 0
    Advanced: int = 0


class AnalyticsSummary(BaseModel):
    quiz_id: uuid.UUID | None = None
    total_submissions: int
    average_score: float
    topic_wise_performance: list[TopicPerformance] = []
    difficulty_distribution: DifficultyDistribution | None = None
