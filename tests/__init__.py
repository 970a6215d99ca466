"""Tests for Rank-Biased Centroids fusion.

Covers the fusion engine against the published worked example, its
properties on generated rankings, input validation, the accumulator used for
incremental and merged fusion, and the settings/logging helpers.
"""
