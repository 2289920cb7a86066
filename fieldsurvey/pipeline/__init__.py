"""
Field Survey Pipeline - 5-Stage Architecture

The pipeline is organized into 5 sequential stages:
    1. LOAD      - Obtain the three packed raw tables
    2. SPLIT     - Split packed columns into named fields
    3. MERGE     - Join observations to species and management
    4. CLEAN     - Filter, project, backfill and cast
    5. AGGREGATE - Build the per-transect summary

Usage:
    from fieldsurvey.pipeline import run_full_pipeline
    result = run_full_pipeline(raw_dir=Path("data/raw"))
    result.summary

Or run individual stages:
    from fieldsurvey.pipeline import run_load, run_split, run_merge, run_clean, run_aggregate
    raw = run_load()
    split = run_split(raw)
    analysis = run_merge(split)
    cleaned = run_clean(analysis)
    summary = run_aggregate(cleaned)
"""

from .stage1_load import run_load
from .stage2_split import run_split
from .stage3_merge import run_merge
from .stage4_clean import run_clean
from .stage5_aggregate import run_aggregate
from .runner import run_full_pipeline, PipelineResult

__all__ = [
    'run_load',
    'run_split',
    'run_merge',
    'run_clean',
    'run_aggregate',
    'run_full_pipeline',
    'PipelineResult',
]
