from typing import List
from pydantic import BaseModel, field_validator

# Input schema for summarize()
class SeriesIn(BaseModel):
    numbers: List[float]  # Sequence of numbers to summarize

    @field_validator('numbers')
    def check_numbers_min_length(cls, v):
        # Ensure at least one number is provided
        if len(v) < 1:
            raise ValueError('numbers must have at least 1 item')
        return v

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for numeric summary
class NumericSummary(BaseModel):
    count: int        # Number of elements
    min: float        # Minimum value
    max: float        # Maximum value
    sum: float        # Sum of values
    mean: float       # Arithmetic mean
    median: float     # Median value
    variance: float   # Population variance
    stddev: float     # Population standard deviation
    magnitude: float  # Euclidean norm
