"""GPU architecture tables and device selection helpers."""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class ComputeMode(IntEnum):
    """How host threads may use a device."""

    DEFAULT = 0
    EXCLUSIVE = 1
    PROHIBITED = 2
    EXCLUSIVE_PROCESS = 3


@dataclass
class DeviceProperties:
    """Properties reported for one GPU device."""

    name: str = ""
    major: int = 0
    minor: int = 0
    total_global_mem: int = 0
    multi_processor_count: int = 0
    clock_rate: int = 0
    memory_clock_rate: int = 0
    memory_bus_width: int = 0
    l2_cache_size: int = 0
    max_texture_1d: int = 0
    max_texture_2d: tuple[int, int] = (0, 0)
    max_texture_3d: tuple[int, int, int] = (0, 0, 0)
    max_texture_1d_layered: tuple[int, int] = (0, 0)
    max_texture_2d_layered: tuple[int, int, int] = (0, 0, 0)
    total_const_mem: int = 0
    shared_mem_per_block: int = 0
    regs_per_block: int = 0
    warp_size: int = 0
    max_threads_per_multiprocessor: int = 0
    max_threads_per_block: int = 0
    max_threads_dim: tuple[int, int, int] = (0, 0, 0)
    max_grid_size: tuple[int, int, int] = (0, 0, 0)
    mem_pitch: int = 0
    texture_alignment: int = 0
    device_overlap: bool = False
    async_engine_count: int = 0
    kernel_exec_timeout_enabled: bool = False
    integrated: bool = False
    can_map_host_memory: bool = False
    surface_alignment: int = 0
    ecc_enabled: bool = False
    tcc_driver: bool = False
    unified_addressing: bool = False
    cooperative_launch: bool = False
    cooperative_multi_device_launch: bool = False
    pci_domain_id: int = 0
    pci_bus_id: int = 0
    pci_device_id: int = 0
    compute_mode: ComputeMode = ComputeMode.DEFAULT


# Cores per multiprocessor, keyed by (major << 4) + minor, in table order.
_CORES_PER_SM: dict[int, int] = {
    0x30: 192,  # Kepler GK10x
    0x32: 192,  # Kepler GK10x
    0x35: 192,  # Kepler GK11x
    0x37: 192,  # Kepler GK21x
    0x50: 128,  # Maxwell GM10x
    0x52: 128,  # Maxwell GM20x
    0x53: 128,  # Maxwell GM20x
    0x60: 64,   # Pascal GP100
    0x61: 128,  # Pascal GP10x
    0x62: 128,  # Pascal GP10x
    0x70: 64,   # Volta GV100
}
_FALLBACK_CORES = list(_CORES_PER_SM.values())[-1]


def cores_per_sm(major: int, minor: int) -> int:
    """Return the CUDA cores per multiprocessor for a compute capability.

    An unknown capability warns and falls back to the newest known entry.
    """
    cores = _CORES_PER_SM.get((major << 4) + minor)
    if cores is not None:
        return cores
    warnings.warn(
        f"MapSMtoCores for SM {major}.{minor} is undefined.  "
        f"Default to use {_FALLBACK_CORES} Cores/SM",
        RuntimeWarning,
        stacklevel=2,
    )
    return _FALLBACK_CORES


def ftoi(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value + 0.5) if value >= 0 else int(value - 0.5)


def max_gflops_device(devices: Sequence[DeviceProperties]) -> int:
    """Return the index of the usable device with the highest estimated throughput.

    Raises ValueError when there are no devices or every device is prohibited.
    """
    if not devices:
        raise ValueError("no devices supporting CUDA")
    usable = [d for d in devices if d.compute_mode != ComputeMode.PROHIBITED]
    if not usable:
        raise ValueError("all devices have compute mode prohibited")

    best_arch = max((d.major for d in usable if 0 < d.major < 9999), default=0)

    best_perf = 0
    best_index = 0
    for index, props in enumerate(devices):
        if props.compute_mode == ComputeMode.PROHIBITED:
            continue
        if props.major == 9999 and props.minor == 9999:
            per_sm = 1
        else:
            per_sm = cores_per_sm(props.major, props.minor)
        perf = props.multi_processor_count * per_sm * props.clock_rate
        if perf > best_perf and (best_arch <= 2 or props.major == best_arch):
            best_perf = perf
            best_index = index
    return best_index


def supports_capability(props: DeviceProperties, major: int, minor: int) -> bool:
    """Tell whether the device's compute capability is at least ``major.minor``."""
    return (props.major, props.minor) >= (major, minor)