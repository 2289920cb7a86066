"""
Shared synthetic survey data for the pipeline tests.

Three transects:
    1 - FIRE + WC, three quadrats, BG recorded in quadrats 1 and 2 only
    2 - Slashing_WC, removed by the cleaning stage
    3 - FIRE, no BG, one species missing from the lookup
"""

import pandas as pd
import pytest

from fieldsurvey.config import RAW_TABLE_CONFIG


OBSERVATION_HEADER = ",".join(RAW_TABLE_CONFIG.observation_fields)
MANAGEMENT_HEADER = ",".join(RAW_TABLE_CONFIG.management_fields)
SPECIES_HEADER = ",".join(RAW_TABLE_CONFIG.species_fields)

OBSERVATION_ROWS = [
    "1,1,vulpia bromoides,15.0",
    "1,1,BG,14.5",
    "1,1,chrysocephalum apiculatum,5",
    "1,1,hypochaeris radicata,2",
    "1,2,BG,4",
    "1,2,BG,6.5",
    "1,2,vulpia bromoides,20",
    "1,3,chrysocephalum apiculatum,3",
    "1,3,wahlenbergia stricta,1",
    "1,3,themeda triandra,40",
    "1,3,L,30",
    "2,1,BG,50",
    "2,1,vulpia bromoides,10",
    "3,1,themeda triandra,60",
    "3,1,R,5",
    "3,2,vulpia bromoides,7",
    "3,2,mystery weed,3",
]

MANAGEMENT_ROWS = [
    "1,50,2016-10-12,N,JM,FIRE + WC,Spring,2,NA,MU1",
    "2,50,2016-10-13,S,JM,Slashing_WC,NA,NA,2015,MU2",
    "3,50,2016-10-14,E,AB,FIRE,Autumn,5,NA,MU3",
]

SPECIES_ROWS = [
    "vulpia bromoides,E,NA,E",
    "hypochaeris radicata,E,forb,E",
    "chrysocephalum apiculatum,N,forb,NF",
    "wahlenbergia stricta,N,forb,NF",
    "themeda triandra,N,grass,NG",
]


def make_packed_frame(header: str, rows) -> pd.DataFrame:
    """Single packed column named by the comma-joined header."""
    return pd.DataFrame({header: list(rows)}, dtype=object)


def make_synthetic_raw_frames(
    observations=None,
    management=None,
    species=None,
) -> dict:
    return {
        "observations": make_packed_frame(
            OBSERVATION_HEADER, OBSERVATION_ROWS if observations is None else observations
        ),
        "management": make_packed_frame(
            MANAGEMENT_HEADER, MANAGEMENT_ROWS if management is None else management
        ),
        "species": make_packed_frame(
            SPECIES_HEADER, SPECIES_ROWS if species is None else species
        ),
    }


def write_raw_dir(path, observations=None, management=None, species=None):
    """Write the three raw files the way the loader expects them."""
    contents = {
        RAW_TABLE_CONFIG.observations_file: (
            OBSERVATION_HEADER, OBSERVATION_ROWS if observations is None else observations
        ),
        RAW_TABLE_CONFIG.management_file: (
            MANAGEMENT_HEADER, MANAGEMENT_ROWS if management is None else management
        ),
        RAW_TABLE_CONFIG.species_file: (
            SPECIES_HEADER, SPECIES_ROWS if species is None else species
        ),
    }
    path.mkdir(parents=True, exist_ok=True)
    for filename, (header, rows) in contents.items():
        (path / filename).write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def raw_tables():
    from fieldsurvey.parsing import RawTables
    return RawTables.from_frames(**make_synthetic_raw_frames())


@pytest.fixture
def split_tables(raw_tables):
    from fieldsurvey.parsing import split_raw_tables
    return split_raw_tables(raw_tables)


@pytest.fixture
def analysis_table(split_tables):
    from fieldsurvey.assembly import merge_analysis_table
    return merge_analysis_table(split_tables)


@pytest.fixture
def cleaned_table(analysis_table):
    from fieldsurvey.assembly import clean_analysis_table
    return clean_analysis_table(analysis_table)
