import pytest

from pixelcircle.gpuarch import (
    ComputeMode,
    DeviceProperties,
    cores_per_sm,
    ftoi,
    max_gflops_device,
    supports_capability,
)


@pytest.mark.parametrize(
    "major, minor, cores",
    [(3, 0, 192), (3, 7, 192), (5, 2, 128), (6, 0, 64), (6, 1, 128), (7, 0, 64)],
)
def test_cores_per_sm_known(major, minor, cores):
    assert cores_per_sm(major, minor) == cores


def test_cores_per_sm_unknown_falls_back_to_last_entry():
    with pytest.warns(RuntimeWarning, match="SM 9.9 is undefined"):
        result = cores_per_sm(9, 9)
    assert result == cores_per_sm(7, 0)


@pytest.mark.parametrize("value", [0.0, 0.49, 1.5, 2.4, 7.5, 100.2])
def test_ftoi_symmetric(value):
    assert ftoi(-value) == -ftoi(value)


@pytest.mark.parametrize("value", [0.0, 1.0, 3.0, -4.0, 12.0])
def test_ftoi_integers_unchanged(value):
    assert ftoi(value) == int(value)


def test_ftoi_rounds_half_away_from_zero():
    assert ftoi(2.5) == 3
    assert ftoi(-2.5) == -3
    assert ftoi(2.4) == 2


def _dev(major, minor, sms, clock, mode=ComputeMode.DEFAULT):
    return DeviceProperties(
        name=f"gpu{major}{minor}",
        major=major,
        minor=minor,
        multi_processor_count=sms,
        clock_rate=clock,
        compute_mode=mode,
    )


def test_max_gflops_picks_fastest():
    devices = [_dev(6, 1, 10, 1000), _dev(6, 1, 20, 1000), _dev(6, 1, 15, 1000)]
    assert max_gflops_device(devices) == 1


def test_max_gflops_prefers_newest_architecture():
    devices = [_dev(5, 2, 100, 2000), _dev(7, 0, 1, 1000)]
    assert max_gflops_device(devices) == 1


def test_max_gflops_skips_prohibited():
    devices = [
        _dev(6, 1, 50, 1000, ComputeMode.PROHIBITED),
        _dev(6, 1, 10, 1000),
    ]
    assert max_gflops_device(devices) == 1


def test_max_gflops_single_device():
    assert max_gflops_device([_dev(3, 5, 4, 500)]) == 0


def test_max_gflops_no_devices():
    with pytest.raises(ValueError, match="no devices"):
        max_gflops_device([])


def test_max_gflops_all_prohibited():
    devices = [_dev(6, 1, 10, 1000, ComputeMode.PROHIBITED)] * 2
    with pytest.raises(ValueError, match="prohibited"):
        max_gflops_device(devices)


def test_supports_capability():
    props = _dev(6, 1, 1, 1)
    assert supports_capability(props, 6, 1)
    assert supports_capability(props, 6, 0)
    assert supports_capability(props, 5, 3)
    assert not supports_capability(props, 6, 2)
    assert not supports_capability(props, 7, 0)


def test_compute_mode_values():
    assert ComputeMode(2) is ComputeMode.PROHIBITED
    assert DeviceProperties().compute_mode is ComputeMode.DEFAULT