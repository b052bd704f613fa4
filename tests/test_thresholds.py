from flareflux.model.thresholds import SAFETY_THRESHOLDS


def test_fixed_threshold_values():
    assert {k: t.flux for k, t in SAFETY_THRESHOLDS.items()} == {
        "safe": 1.5,
        "short_exposure": 3.0,
        "very_short_exposure": 4.6,
    }


def test_thresholds_ordered_by_increasing_flux():
    fluxes = [t.flux for t in SAFETY_THRESHOLDS.values()]
    assert fluxes == sorted(fluxes)


def test_labels():
    assert SAFETY_THRESHOLDS["safe"].label == "Safe Working Distance (1.5 kW/m²)"
    assert SAFETY_THRESHOLDS["short_exposure"].label == "Short Exposure Limit (~48s) (3.0 kW/m²)"
    assert SAFETY_THRESHOLDS["very_short_exposure"].label == "Very Short Exposure Limit (~45s) (4.6 kW/m²)"


def test_legend_labels():
    assert SAFETY_THRESHOLDS["safe"].legend_label == "Safe Limit (1.5 kW/m²)"
    assert SAFETY_THRESHOLDS["short_exposure"].legend_label == "Short Exposure (3.0 kW/m²)"
    assert SAFETY_THRESHOLDS["very_short_exposure"].legend_label == "Very Short Exposure (4.6 kW/m²)"
