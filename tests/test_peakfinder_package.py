import numpy as np

from peakfinder import (
    PARAM_ALIASES,
    FinderConfig,
    Limits,
    PeakFinder,
    __all__,
    find_peaks,
)


def test_public_api_exports():
    expected = {
        "PARAM_ALIASES",
        "FinderConfig",
        "Limits",
        "Peak",
        "PeakFinder",
        "find_nearest_peak",
        "find_peaks",
        "peak_table",
        "sort_by_position",
    }
    assert set(__all__) == expected


def test_config_aliases_and_normalization():
    cfg = FinderConfig.from_case_info(
        {
            "threshold": 0.5,
            "min_distance": 3,
            "max_plateau_size": 4,
        }
    )

    assert cfg.difference == Limits(lower=0.5)
    assert cfg.distance == Limits(lower=3)
    assert cfg.plateau_size == Limits(upper=4)
    assert PARAM_ALIASES["threshold"] == "difference"


def test_function_and_class_agree():
    rng = np.random.default_rng(7)
    y = rng.normal(size=300)

    config = {"height": 0.5, "prominence": 0.2, "distance": 4}
    from_function = find_peaks(y, config=config)
    from_class = (
        PeakFinder(y)
        .with_min_height(0.5)
        .with_min_prominence(0.2)
        .with_min_distance(4)
        .find_peaks()
    )

    assert from_function == from_class
    assert all(p.height >= 0.5 for p in from_function)
