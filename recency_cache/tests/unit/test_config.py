"""Unit tests for cache configuration."""

import pytest
from pydantic import ValidationError as ConfigValidationError

from recency_cache.domain.value_objects.config import CacheConfig, CapacityPolicy
from recency_cache.config import DEFAULT_CAPACITY


class TestCacheConfig:
    """Tests for CacheConfig."""
    
    def test_default_values(self):
        config = CacheConfig()
        assert config.capacity == DEFAULT_CAPACITY
        assert config.policy == CapacityPolicy.STRICT
    
    def test_custom_values(self):
        config = CacheConfig(capacity=7, policy="clamp")
        assert config.capacity == 7
        assert config.policy is CapacityPolicy.CLAMP
    
    def test_strict_rejects_zero(self):
        with pytest.raises(ConfigValidationError):
            CacheConfig(capacity=0)
    
    def test_strict_rejects_negative(self):
        with pytest.raises(ConfigValidationError):
            CacheConfig(capacity=-3)
    
    def test_clamp_accepts_non_positive(self):
        config = CacheConfig(capacity=0, policy=CapacityPolicy.CLAMP)
        assert config.capacity == 0
    
    def test_capacity_must_be_int(self):
        with pytest.raises(ConfigValidationError):
            CacheConfig(capacity="2")
        
        with pytest.raises(ConfigValidationError):
            CacheConfig(capacity=True)
    
    def test_unknown_policy(self):
        with pytest.raises(ConfigValidationError):
            CacheConfig(capacity=2, policy="lenient")
    
    def test_frozen(self):
        config = CacheConfig(capacity=2)
        with pytest.raises(ConfigValidationError):
            config.capacity = 5
