import numpy as np
import pytest
from scipy import stats

from pysatl_mcdist.config.factory import distribution_from_mapping
from pysatl_mcdist.distributions.constraints import DistributionConfigurationError
from pysatl_mcdist.variants import Discrete, Equiprobable, Maxwell, Tabular, Watt

N = 100_000
P_VALUE_FLOOR = 1e-3


def _rng(seed: int = 20251019) -> np.random.Generator:
    return np.random.default_rng(seed)


def _draw(distr, n: int, path: str) -> np.ndarray:
    rng = _rng()
    if path == "batch":
        return distr.sample_n(n, rng=rng).values
    return np.array([distr.sample(rng) for _ in range(n)])


@pytest.mark.parametrize("path", ["batch", "scalar"])
def test_discrete_frequencies_follow_probabilities(path: str) -> None:
    distr = Discrete(x=[1.0, 2.0, 3.0], p=[0.2, 0.5, 0.3])
    values = _draw(distr, N, path)
    observed = np.array([np.count_nonzero(values == v) for v in (1.0, 2.0, 3.0)])
    assert observed.sum() == N
    result = stats.chisquare(observed, f_exp=N * distr.p)
    assert result.pvalue > P_VALUE_FLOOR


@pytest.mark.parametrize("interpolation", ["histogram", "linear-linear"])
def test_tabular_inverse_transform_round_trip(interpolation: str) -> None:
    distr = Tabular(x=[0.0, 1.0, 2.0, 4.0], p=[0.5, 1.0, 0.2, 0.7], interpolation=interpolation)
    rng = _rng()
    values = np.array([distr.sample(rng) for _ in range(20_000)])
    result = stats.kstest(distr.cdf(values), "uniform")
    assert result.pvalue > P_VALUE_FLOOR


def test_unit_histogram_is_standard_uniform() -> None:
    distr = Tabular(x=[0.0, 1.0], p=[1.0, 1.0])
    values = distr.sample_n(20_000, rng=_rng()).values
    assert stats.kstest(values, "uniform").pvalue > P_VALUE_FLOOR


def test_triangle_mean() -> None:
    distr = Tabular(x=[0.0, 1.0, 2.0], p=[0.0, 1.0, 0.0], interpolation="linear-linear")
    values = distr.sample_n(N, rng=_rng()).values
    assert np.all((values >= 0.0) & (values <= 2.0))
    assert values.mean() == pytest.approx(1.0, abs=0.01)


def test_maxwell_mean() -> None:
    distr = Maxwell(theta=2.0)
    values = distr.sample_n(N, rng=_rng()).values
    assert values.mean() == pytest.approx(3.0, abs=0.05)
    assert stats.kstest(values, stats.gamma(a=1.5, scale=2.0).cdf).pvalue > P_VALUE_FLOOR


@pytest.mark.parametrize(
    "distr, n",
    [
        (Maxwell(theta=0.5), 1_000_000),
        (Maxwell(theta=1e-6), 50_000),
        (Watt(a=0.988, b=2.249), 1_000_000),
        (Watt(a=1.0, b=1e-8), 50_000),
    ],
    ids=["maxwell", "maxwell_cold", "watt", "watt_small_b"],
)
def test_spectra_never_negative_or_infinite(distr, n: int) -> None:
    values = distr.sample_n(n, rng=_rng()).values
    assert values.size == n
    assert np.all(np.isfinite(values))
    assert np.all(values >= 0.0)


def test_watt_mean() -> None:
    distr = Watt(a=0.988, b=2.249)
    values = distr.sample_n(N, rng=_rng()).values
    assert values.mean() == pytest.approx(distr.mean, abs=0.05)


@pytest.mark.parametrize("path", ["batch", "scalar"])
def test_equiprobable_thirds(path: str) -> None:
    distr = Equiprobable(x=[0.0, 1.0, 2.0, 3.0])
    values = _draw(distr, 60_000, path)
    counts = np.histogram(values, bins=[0.0, 1.0, 2.0, 3.0])[0] / values.size
    np.testing.assert_allclose(counts, [1.0 / 3.0] * 3, atol=0.01)


def test_factory_rejects_malformed_tables() -> None:
    with pytest.raises(DistributionConfigurationError):
        distribution_from_mapping({"type": "discrete", "x": [1.0, 2.0], "p": [1.0]})
    with pytest.raises(DistributionConfigurationError):
        distribution_from_mapping({"type": "tabular", "x": [0.0, 0.0, 1.0], "p": [1.0, 1.0, 1.0]})
