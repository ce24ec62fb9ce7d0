"""Baseline engine: fingerprinting, matching, persistence and orchestration."""
