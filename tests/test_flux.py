from __future__ import annotations

import math

import numpy as np
import pytest

from flareflux.model.flux import (
    DomainError,
    compute_heat_flux,
    compute_heat_release,
    compute_safe_distance,
    heat_release_breakdown,
    round_half_away_from_zero,
    solve_distance_for_flux,
)


@pytest.mark.parametrize("flow_rate, heat_content", [(150.0, 650.0), (1.0, 1.0), (0.5, 1020.0), (2500.0, 450.0)])
def test_heat_release_matches_conversion_chain(flow_rate, heat_content):
    expected = flow_rate * heat_content * 1440 / 3412 / 24
    assert compute_heat_release(flow_rate, heat_content) == pytest.approx(expected, rel=1e-9)


def test_heat_release_reference_flare():
    assert compute_heat_release(150, 650) == pytest.approx(1714.5369284877, rel=1e-9)


def test_breakdown_keeps_every_step():
    q = heat_release_breakdown(150, 650)
    assert q.btu_per_minute == 97500
    assert q.btu_per_day == 140_400_000
    assert q.kwh_per_day == pytest.approx(41148.886284, rel=1e-9)
    assert q.kilowatts == compute_heat_release(150, 650)


def test_heat_flux_reference_flare_at_ten_meters():
    assert compute_heat_flux(150, 650, 0.35, 10) == pytest.approx(0.4775347977, rel=1e-8)


def test_inverse_square_law():
    distances = np.array([0.5, 1.0, 3.0, 10.0, 42.0, 100.0])
    flux = compute_heat_flux(150, 650, 0.35, distances)
    products = flux * distances ** 2
    assert np.allclose(products, products[0], rtol=1e-12)
    assert products[0] == pytest.approx(47.7534797744, rel=1e-9)


def test_scalar_and_array_distance_agree():
    scalar = compute_heat_flux(200, 500, 0.2, 7.0)
    array = compute_heat_flux(200, 500, 0.2, np.array([7.0]))
    assert isinstance(scalar, float)
    assert array[0] == scalar


def test_flux_strictly_decreasing_in_distance():
    flux = compute_heat_flux(150, 650, 0.35, np.arange(1, 101, dtype=float))
    assert np.all(np.diff(flux) < 0)


def test_full_radiation_fraction_gives_maximum_flux():
    full = compute_heat_flux(150, 650, 1.0, 5.0)
    for fraction in (0.99, 0.5, 0.35, 0.01):
        assert compute_heat_flux(150, 650, fraction, 5.0) < full


def test_flux_vanishes_with_radiation_fraction():
    assert compute_heat_flux(150, 650, 1e-12, 1.0) < 1e-9


@pytest.mark.parametrize(
    "distance",
    [0, 0.0, -1.0, math.nan, np.array([1.0, 0.0, 2.0]), np.array([1.0, np.nan])],
)
def test_non_positive_distance_is_a_domain_error(distance):
    with pytest.raises(DomainError):
        compute_heat_flux(150, 650, 0.35, distance)


def test_domain_error_is_a_value_error():
    assert issubclass(DomainError, ValueError)


@pytest.mark.parametrize(
    "target_flux, expected",
    [(1.5, 5.6), (3.0, 4.0), (4.6, 3.2)],
)
def test_safe_distances_for_reference_flare(target_flux, expected):
    q = compute_heat_release(150, 650)
    assert compute_safe_distance(q, 0.35, target_flux) == expected


def test_unrounded_distance_for_safe_flux():
    q = compute_heat_release(150, 650)
    assert solve_distance_for_flux(q, 0.35, 1.5) == pytest.approx(5.6423092066, rel=1e-9)


@pytest.mark.parametrize("distance", [1.0, 2.37, 10.0, 55.5, 100.0])
def test_safe_distance_round_trip(distance):
    q = compute_heat_release(150, 650)
    flux = compute_heat_flux(150, 650, 0.35, distance)
    assert abs(compute_safe_distance(q, 0.35, flux) - distance) <= 0.1


def test_zero_heat_release_gives_zero_distance():
    assert compute_safe_distance(0.0, 0.35, 1.5) == 0.0


@pytest.mark.parametrize(
    "heat_release, rad_fraction, target_flux",
    [
        (1000.0, 0.35, 0.0),
        (1000.0, 0.35, -1.5),
        (-1.0, 0.35, 1.5),
        (1000.0, 0.0, 1.5),
        (1000.0, 1.01, 1.5),
        (1000.0, 0.35, math.nan),
    ],
)
def test_safe_distance_domain_errors(heat_release, rad_fraction, target_flux):
    with pytest.raises(DomainError):
        compute_safe_distance(heat_release, rad_fraction, target_flux)


@pytest.mark.parametrize(
    "value, expected",
    [(0.25, 0.3), (-0.25, -0.3), (2.75, 2.8), (5.6423, 5.6), (3.99, 4.0), (0.0, 0.0)],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value, 1) == expected


def test_round_to_integer():
    assert round_half_away_from_zero(2.5, 0) == 3.0
    assert round_half_away_from_zero(-2.5, 0) == -3.0


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_rounding_non_finite_is_a_domain_error(value):
    with pytest.raises(DomainError):
        round_half_away_from_zero(value, 1)


def test_overflowing_heat_release_has_no_safe_distance():
    q = compute_heat_release(1e306, 650)
    assert math.isinf(q)
    with pytest.raises(DomainError):
        compute_safe_distance(q, 0.35, 1.5)
