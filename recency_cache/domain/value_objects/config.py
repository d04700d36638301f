"""Configuration value objects with validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ...config import DEFAULT_CAPACITY, CapacityPolicy


class CacheConfig(BaseModel):
    """Cache construction settings with validation."""
    
    model_config = {"frozen": True}
    
    capacity: int = Field(default=DEFAULT_CAPACITY, strict=True)
    policy: CapacityPolicy = CapacityPolicy.STRICT
    
    @model_validator(mode='after')
    def check_capacity(self) -> CacheConfig:
        """Reject non-positive capacities unless the legacy clamp is requested."""
        if self.policy is CapacityPolicy.STRICT and self.capacity <= 0:
            raise ValueError(
                f"capacity must be greater than 0 with the strict policy, got {self.capacity}"
            )
        return self


__all__ = [
    'CacheConfig',
    'CapacityPolicy',
]
