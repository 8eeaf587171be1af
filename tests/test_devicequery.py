import pytest

from pixelcircle.devicequery import (
    format_device,
    format_report,
    format_version,
    peer_access_lines,
    profile_line,
)
from pixelcircle.gpuarch import ComputeMode, DeviceProperties


def _device(name="Test GPU", **overrides):
    fields = dict(
        name=name,
        major=6,
        minor=1,
        multi_processor_count=20,
        clock_rate=1500000,
        total_global_mem=8 * 1048576,
        tcc_driver=True,
    )
    fields.update(overrides)
    return DeviceProperties(**fields)


def test_format_version_known_value():
    assert format_version(9020) == "9.2"


def test_profile_line_embeds_versions_and_count():
    line = profile_line(9020, 9000, 3)
    assert line.startswith("deviceQuery, CUDA Driver = CUDART")
    assert f"CUDA Driver Version = {format_version(9020)}" in line
    assert f"CUDA Runtime Version = {format_version(9000)}" in line
    assert line.endswith("NumDevs = 3")


def test_format_device_header_and_capability():
    lines = format_device(0, _device(), 9020, 9000)
    assert lines[0] == 'Device 0: "Test GPU"'
    assert lines[2].endswith("6.1")
    assert any(line.endswith(f"{128 * 20} CUDA Cores") for line in lines)


def test_format_device_l2_line_only_when_nonzero():
    without = format_device(0, _device(l2_cache_size=0), 1000, 1000)
    with_l2 = format_device(0, _device(l2_cache_size=4096), 1000, 1000)
    assert not any("L2 Cache Size" in line for line in without)
    assert any(line.endswith("4096 bytes") and "L2 Cache Size" in line for line in with_l2)
    assert len(with_l2) == len(without) + 1


def test_format_device_compute_mode_and_flags():
    props = _device(compute_mode=ComputeMode.PROHIBITED, ecc_enabled=True)
    lines = format_device(1, props, 1000, 1000)
    assert lines[-1] == (
        "     < Prohibited (no host thread can use ::cudaSetDevice() with this device) >"
    )
    assert lines[-2] == "  Compute Mode:"
    assert any(line.endswith("Enabled") and "ECC" in line for line in lines)


def test_format_device_unknown_capability_warns():
    with pytest.warns(RuntimeWarning):
        lines = format_device(0, _device(major=9, minor=9), 1000, 1000)
    assert lines[0] == 'Device 0: "Test GPU"'


def test_peer_access_needs_two_devices():
    assert peer_access_lines([_device()], lambda i, j: True) == []


def test_peer_access_skips_old_devices():
    devices = [_device("A"), _device("B", major=1)]
    assert peer_access_lines(devices, lambda i, j: True) == []


def test_peer_access_pairs():
    devices = [_device("A"), _device("B")]
    lines = peer_access_lines(devices, lambda i, j: i == 0)
    assert lines == [
        "> Peer access from A (GPU0) -> B (GPU1) : Yes",
        "> Peer access from B (GPU1) -> A (GPU0) : No",
    ]


def test_report_without_devices():
    report = format_report("prog", [], 9020, 9000)
    lines = report.splitlines()
    assert lines[0] == "prog Starting..."
    assert "There are no available device(s) that support CUDA" in lines
    assert profile_line(0, 0, 0) in lines
    assert report.endswith("Result = PASS\n")


def test_report_with_devices():
    devices = [_device("A"), _device("B")]
    report = format_report("prog", devices, 9020, 9000, lambda i, j: True)
    lines = report.splitlines()
    assert "Detected 2 CUDA Capable device(s)" in lines
    assert 'Device 0: "A"' in lines
    assert 'Device 1: "B"' in lines
    assert "> Peer access from A (GPU0) -> B (GPU1) : Yes" in lines
    assert profile_line(9020, 9000, 2) in lines
    assert lines[-1] == "Result = PASS"