# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""Tests for the bounded memo cache and engine configuration."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from seasonkit.cache import CacheStats, EvictionPolicy, ReferenceCache, make_key
from seasonkit.config import EngineConfig, LabAdjustment, PopulationCorrection
from seasonkit.errors import ConfigurationError, InvalidColor
from seasonkit.schema import LabColor


# =============================================================================
# Keys
# =============================================================================


class TestMakeKey:

    def test_rounds_floats(self):
        assert make_key("lab", 67.0000001, 9.0, 16.0) == make_key("lab", 67.0, 9.0, 16.0)

    def test_precision(self):
        assert make_key("lab", 1.24, digits=1) == ("lab", 1.2)
        assert make_key("lab", 1.26, digits=1) != ("lab", 1.2)

    def test_negative_zero(self):
        assert make_key("lab", -0.0) == make_key("lab", 0.0)
        assert str(make_key("lab", -0.0)[1]) == "0.0"

    def test_non_floats_pass_through(self):
        assert make_key("rgb", 255, "D65") == ("rgb", 255, "D65")

    def test_kind_separates_entries(self):
        assert make_key("lab", 1.0) != make_key("rgb", 1.0)


# =============================================================================
# Cache
# =============================================================================


class TestReferenceCache:

    def test_get_miss_returns_default(self):
        cache = ReferenceCache(4)
        assert cache.get("a") is None
        assert cache.get("a", 7) == 7

    def test_put_and_get(self):
        cache = ReferenceCache(4)
        cache.put("a", 1)
        assert cache.get("a") == 1
        assert "a" in cache
        assert len(cache) == 1

    def test_lru_evicts_least_recently_used(self):
        cache = ReferenceCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache

    def test_fifo_ignores_hits(self):
        cache = ReferenceCache(2, EvictionPolicy.FIFO)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert "a" not in cache
        assert "b" in cache

    def test_policy_by_name(self):
        assert ReferenceCache(2, "fifo").policy is EvictionPolicy.FIFO

    def test_replace_existing_does_not_evict(self):
        cache = ReferenceCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        assert len(cache) == 2
        assert cache.get("a") == 10
        assert cache.get("b") == 2

    def test_capacity_is_never_exceeded(self):
        cache = ReferenceCache(3)
        for i in range(50):
            cache.put(i, i)
        assert len(cache) == 3
        assert cache.stats().size == 3

    def test_get_or_compute_runs_once(self):
        cache = ReferenceCache(4)
        calls = []

        def compute():
            calls.append(1)
            return 42

        assert cache.get_or_compute("k", compute) == 42
        assert cache.get_or_compute("k", compute) == 42
        assert len(calls) == 1

    def test_cached_none_is_a_hit(self):
        cache = ReferenceCache(4)
        calls = []
        cache.get_or_compute("k", lambda: calls.append(1))
        cache.get_or_compute("k", lambda: calls.append(1))
        assert len(calls) == 1

    def test_stats(self):
        cache = ReferenceCache(4)
        cache.put("a", 1)
        cache.get("a")
        cache.get("a")
        cache.get("b")
        stats = cache.stats()
        assert stats == CacheStats(hits=2, misses=1, size=1, capacity=4)
        assert stats.hit_rate == pytest.approx(2 / 3)

    def test_hit_rate_empty(self):
        assert ReferenceCache(1).stats().hit_rate == 0.0

    def test_clear(self):
        cache = ReferenceCache(4)
        cache.put("a", 1)
        cache.get("a")
        cache.clear()
        assert len(cache) == 0
        assert cache.stats() == CacheStats(hits=0, misses=0, size=0, capacity=4)

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_rejects_bad_capacity(self, capacity):
        with pytest.raises(ConfigurationError):
            ReferenceCache(capacity)

    def test_shared_across_threads(self):
        cache = ReferenceCache(64)

        def work(i):
            key = make_key("square", float(i % 16))
            return cache.get_or_compute(key, lambda: (i % 16) ** 2)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(400)))

        assert results == [(i % 16) ** 2 for i in range(400)]
        assert len(cache) == 16
        stats = cache.stats()
        assert stats.hits + stats.misses == 400


# =============================================================================
# Configuration
# =============================================================================


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.illuminant == "D65"
        assert config.precision == 3
        assert config.max_distance == 20.0
        assert config.build_cache() is None

    def test_build_cache(self):
        cache = EngineConfig(cache_size=8, cache_policy=EvictionPolicy.FIFO).build_cache()
        assert isinstance(cache, ReferenceCache)
        assert cache.capacity == 8
        assert cache.policy is EvictionPolicy.FIFO

    def test_each_build_is_a_new_cache(self):
        config = EngineConfig(cache_size=8)
        assert config.build_cache() is not config.build_cache()

    @pytest.mark.parametrize("kwargs", [
        {"precision": -1},
        {"precision": 13},
        {"precision": 2.5},
        {"max_distance": 0.0},
        {"range_penalty": -1.0},
        {"cache_size": -5},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            EngineConfig(**kwargs)

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(AttributeError):
            config.precision = 5


class TestPopulationCorrection:

    def test_identity(self):
        assert PopulationCorrection().is_identity
        assert not PopulationCorrection(contrast=1.2).is_identity

    @pytest.mark.parametrize("kwargs", [
        {"brightness": -0.1},
        {"saturation": float("nan")},
        {"contrast": float("inf")},
        {"contrast": "high"},
    ])
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            PopulationCorrection(**kwargs)

    def test_zero_is_allowed(self):
        assert PopulationCorrection(brightness=0.0).brightness == 0.0


class TestLabAdjustment:

    def test_identity(self):
        adjustment = LabAdjustment()
        assert adjustment.is_identity
        assert adjustment.apply((67.0, 9.0, 16.0)) == LabColor(67.0, 9.0, 16.0)

    def test_apply(self):
        adjustment = LabAdjustment(l_offset=2.0, a_scale=0.5, b_offset=-1.0)
        assert adjustment.apply((67.0, 9.0, 16.0)) == LabColor(69.0, 4.5, 15.0)

    def test_then_composes_in_order(self):
        first = LabAdjustment(l_offset=2.0, l_scale=0.5)
        second = LabAdjustment(l_offset=1.0, l_scale=2.0)
        combined = first.then(second)
        assert combined.apply((60.0, 0.0, 0.0)) == second.apply(first.apply((60.0, 0.0, 0.0)))
        assert combined.l_scale == 1.0
        assert combined.l_offset == 5.0

    def test_result_must_stay_in_lab_domain(self):
        with pytest.raises(InvalidColor):
            LabAdjustment(l_offset=10.0).apply((95.0, 0.0, 0.0))

    def test_rejects_non_finite(self):
        with pytest.raises(ConfigurationError):
            LabAdjustment(a_scale=float("nan"))
