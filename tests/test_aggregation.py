"""
Tests for percent-cover and diversity aggregation and summary assembly.
"""

import numpy as np
import pandas as pd
import pytest


def make_synthetic_cleaned(rows) -> pd.DataFrame:
    """Cleaned-table rows: (transect, quadrat, species, type, cover, management, years_since)."""
    df = pd.DataFrame(rows, columns=[
        "transect_number", "quadrat", "species", "type",
        "percent_cover", "management", "years_since",
    ])
    df["transect_number"] = df["transect_number"].astype("Int64")
    df["quadrat"] = df["quadrat"].astype("Int64")
    df["percent_cover"] = df["percent_cover"].astype("float64")
    df["management"] = df["management"].astype("category")
    df["years_since"] = df["years_since"].astype("float64")
    return df


class TestPercentCover:
    """Tests for Pass A: sum within quadrat, mean across quadrats."""

    def test_sum_within_quadrat(self, cleaned_table):
        from fieldsurvey.aggregation.percent_cover import sum_cover_by_quadrat

        per_quadrat = sum_cover_by_quadrat(cleaned_table)
        bg = per_quadrat[
            (per_quadrat["transect_number"] == 1) & (per_quadrat["type"] == "BG")
        ]

        assert bg["quadrat"].tolist() == [1, 2]
        assert bg["quadrat_pc"].tolist() == pytest.approx([14.5, 10.5])

    def test_mean_excludes_quadrats_without_type(self, cleaned_table):
        from fieldsurvey.aggregation import compute_percent_cover

        cover = compute_percent_cover(cleaned_table).set_index("transect_number")

        # BG recorded in quadrats 1 and 2 of 3; quadrat 3 is not a zero
        assert cover.loc[1, "BG_pc"] == pytest.approx(12.5)
        assert cover.loc[1, "BG_pc"] != pytest.approx((14.5 + 10.5) / 3)

    def test_exotic_cover(self, cleaned_table):
        from fieldsurvey.aggregation import compute_percent_cover

        cover = compute_percent_cover(cleaned_table).set_index("transect_number")

        # quadrat 1: 15 + 2, quadrat 2: 20
        assert cover.loc[1, "E_pc"] == pytest.approx(18.5)
        assert cover.loc[3, "E_pc"] == pytest.approx(7.0)

    def test_transect_without_type_is_null(self, cleaned_table):
        from fieldsurvey.aggregation import compute_percent_cover

        cover = compute_percent_cover(cleaned_table).set_index("transect_number")
        assert np.isnan(cover.loc[3, "BG_pc"])

    def test_output_columns(self, cleaned_table):
        from fieldsurvey.aggregation import compute_percent_cover

        cover = compute_percent_cover(cleaned_table)

        assert list(cover.columns) == ["transect_number", "BG_pc", "E_pc"]
        assert cover["transect_number"].tolist() == [1, 3]

    def test_transect_with_no_selected_types_kept(self):
        from fieldsurvey.aggregation import compute_percent_cover

        cleaned = make_synthetic_cleaned([
            (5, 1, "L", "L", 80.0, "FIRE", 1.0),
            (5, 2, "themeda triandra", "NG", 20.0, "FIRE", 1.0),
        ])
        cover = compute_percent_cover(cleaned)

        assert cover["transect_number"].tolist() == [5]
        assert cover[["BG_pc", "E_pc"]].isna().all().all()

    def test_missing_cover_makes_mean_null(self):
        from fieldsurvey.aggregation import compute_percent_cover

        cleaned = make_synthetic_cleaned([
            (1, 1, "BG", "BG", 10.0, "FIRE", 1.0),
            (1, 2, "BG", "BG", np.nan, "FIRE", 1.0),
            (1, 1, "vulpia bromoides", "E", 4.0, "FIRE", 1.0),
        ])
        cover = compute_percent_cover(cleaned).set_index("transect_number")

        # Not 5.0: the missing quadrat is neither zero nor dropped
        assert pd.isna(cover.loc[1, "BG_pc"])
        assert cover.loc[1, "E_pc"] == pytest.approx(4.0)

    def test_missing_cover_makes_quadrat_total_null(self):
        from fieldsurvey.aggregation.percent_cover import sum_cover_by_quadrat

        cleaned = make_synthetic_cleaned([
            (1, 1, "BG", "BG", 10.0, "FIRE", 1.0),
            (1, 1, "BG", "BG", np.nan, "FIRE", 1.0),
            (1, 2, "BG", "BG", 6.0, "FIRE", 1.0),
        ])
        per_quadrat = sum_cover_by_quadrat(cleaned)

        assert pd.isna(per_quadrat["quadrat_pc"].iloc[0])
        assert per_quadrat["quadrat_pc"].iloc[1] == pytest.approx(6.0)


class TestDiversity:
    """Tests for Pass B: distinct species counts."""

    def test_distinct_counts(self, cleaned_table):
        from fieldsurvey.aggregation import compute_diversity

        div = compute_diversity(cleaned_table).set_index("transect_number")

        # vulpia appears twice in transect 1 but counts once
        assert div.loc[1, "E_diversity"] == 2
        assert div.loc[1, "NF_diversity"] == 2
        assert div.loc[3, "E_diversity"] == 1
        assert pd.isna(div.loc[3, "NF_diversity"])

    def test_dtypes(self, cleaned_table):
        from fieldsurvey.aggregation import compute_diversity

        div = compute_diversity(cleaned_table)

        assert list(div.columns) == ["transect_number", "E_diversity", "NF_diversity"]
        assert str(div["E_diversity"].dtype) == "Int64"
        assert str(div["NF_diversity"].dtype) == "Int64"

    def test_diversity_never_exceeds_row_count(self, cleaned_table):
        from fieldsurvey.aggregation.diversity import count_distinct_species

        counts = count_distinct_species(cleaned_table, ["E", "NF"])
        rows = (
            cleaned_table[cleaned_table["type"].isin(["E", "NF"])]
            .groupby(["transect_number", "type"])
            .size()
            .reset_index(name="n_rows")
        )
        merged = counts.merge(rows, on=["transect_number", "type"])

        assert len(merged) == len(counts)
        assert (merged["diversity"] <= merged["n_rows"]).all()

    def test_transect_without_e_or_nf_absent(self):
        from fieldsurvey.aggregation import compute_diversity

        cleaned = make_synthetic_cleaned([
            (1, 1, "vulpia bromoides", "E", 10.0, "FIRE", 1.0),
            (2, 1, "themeda triandra", "NG", 20.0, "FIRE", 1.0),
        ])
        div = compute_diversity(cleaned)

        assert div["transect_number"].tolist() == [1]

    def test_no_matching_rows(self):
        from fieldsurvey.aggregation import compute_diversity

        cleaned = make_synthetic_cleaned([
            (2, 1, "themeda triandra", "NG", 20.0, "FIRE", 1.0),
        ])
        div = compute_diversity(cleaned)

        assert len(div) == 0
        assert list(div.columns) == ["transect_number", "E_diversity", "NF_diversity"]


class TestTransectAttributes:
    """Tests for the transect-level attribute projection."""

    def test_constant_attributes_pass(self):
        from fieldsurvey.assembly import transect_attributes

        cleaned = make_synthetic_cleaned([
            (1, 1, "BG", "BG", 10.0, "FIRE + WC", 2.0),
            (1, 2, "BG", "BG", 12.0, "FIRE + WC", 2.0),
            (3, 1, "BG", "BG", 5.0, "FIRE", np.nan),
            (3, 2, "BG", "BG", 7.0, "FIRE", np.nan),
        ])
        attrs = transect_attributes(cleaned)

        assert attrs["transect_number"].tolist() == [1, 3]
        assert attrs["management"].astype(str).tolist() == ["FIRE + WC", "FIRE"]

    def test_differing_management_raises(self):
        from fieldsurvey.assembly import transect_attributes
        from fieldsurvey.exceptions import InvariantViolationError

        cleaned = make_synthetic_cleaned([
            (1, 1, "BG", "BG", 10.0, "FIRE + WC", 2.0),
            (7, 1, "BG", "BG", 10.0, "FIRE", 2.0),
            (7, 2, "BG", "BG", 12.0, "Slashing", 2.0),
        ])

        with pytest.raises(InvariantViolationError) as exc_info:
            transect_attributes(cleaned)

        err = exc_info.value
        assert err.transect_number == 7
        assert sorted(err.values["management"]) == ["FIRE", "Slashing"]
        assert "years_since" not in err.values

    def test_differing_years_since_raises(self):
        from fieldsurvey.assembly import transect_attributes
        from fieldsurvey.exceptions import InvariantViolationError

        cleaned = make_synthetic_cleaned([
            (1, 1, "BG", "BG", 10.0, "FIRE", 2.0),
            (1, 2, "BG", "BG", 12.0, "FIRE", 3.0),
        ])

        with pytest.raises(InvariantViolationError):
            transect_attributes(cleaned)


class TestTransectSummaryAssembler:
    """Tests for the final summary assembly."""

    def test_columns_and_order(self, cleaned_table):
        from fieldsurvey.assembly import assemble_summary

        summary = assemble_summary(cleaned_table)

        assert list(summary.columns) == [
            "transect_number", "BG_pc", "E_pc", "E_diversity", "NF_diversity",
            "management", "years_since",
        ]
        assert summary["transect_number"].tolist() == [1, 3]
        assert summary.index.tolist() == [0, 1]

    def test_values(self, cleaned_table):
        from fieldsurvey.assembly import assemble_summary

        summary = assemble_summary(cleaned_table).set_index("transect_number")

        assert summary.loc[1, "BG_pc"] == pytest.approx(12.5)
        assert summary.loc[1, "E_pc"] == pytest.approx(18.5)
        assert summary.loc[1, "E_diversity"] == 2
        assert summary.loc[1, "NF_diversity"] == 2
        assert summary.loc[1, "management"] == "FIRE + WC"
        assert summary.loc[1, "years_since"] == 2.0
        assert summary.loc[3, "management"] == "FIRE"
        assert summary.loc[3, "years_since"] == 5.0

    def test_dtypes(self, cleaned_table):
        from fieldsurvey.assembly import assemble_summary

        summary = assemble_summary(cleaned_table)

        assert isinstance(summary["management"].dtype, pd.CategoricalDtype)
        assert summary["BG_pc"].dtype == "float64"
        assert summary["years_since"].dtype == "float64"
        assert str(summary["E_diversity"].dtype) == "Int64"

    def test_sorted_regardless_of_input_order(self):
        from fieldsurvey.assembly import assemble_summary

        cleaned = make_synthetic_cleaned([
            (9, 1, "BG", "BG", 10.0, "FIRE", 1.0),
            (2, 1, "vulpia bromoides", "E", 5.0, "FIRE", 3.0),
            (4, 1, "BG", "BG", 20.0, "FIRE", 2.0),
        ])
        summary = assemble_summary(cleaned)

        assert summary["transect_number"].tolist() == [2, 4, 9]

    def test_get_summary(self, cleaned_table):
        from fieldsurvey.assembly import TransectSummaryAssembler

        stats = TransectSummaryAssembler(cleaned_table).get_summary()

        assert stats["total_transects"] == 2
        assert stats["bg_cover_coverage"] == pytest.approx(0.5)
        assert stats["management_categories"] == ["FIRE", "FIRE + WC"]
