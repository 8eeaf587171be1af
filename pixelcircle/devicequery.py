"""Render a device query report from already collected device properties."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from pixelcircle.gpuarch import DeviceProperties, cores_per_sm

PeerCheck = Callable[[int, int], bool]

_ON_WINDOWS = sys.platform == "win32"

_COMPUTE_MODES = (
    "Default (multiple host threads can use ::cudaSetDevice() with device simultaneously)",
    "Exclusive (only one host thread in one process is able to use ::cudaSetDevice() with this device)",
    "Prohibited (no host thread can use ::cudaSetDevice() with this device)",
    "Exclusive Process (many threads in one process is able to use ::cudaSetDevice() with this device)",
)
_UNKNOWN_MODE = "Unknown"


def _yes_no(flag: object) -> str:
    return "Yes" if flag else "No"


def format_version(version: int) -> str:
    """Render an encoded version number such as 9020 as ``major.minor``."""
    return f"{version // 1000}.{(version % 100) // 10}"


def _compute_mode_text(mode: int) -> str:
    mode = int(mode)
    if 0 <= mode < len(_COMPUTE_MODES):
        return _COMPUTE_MODES[mode]
    return _UNKNOWN_MODE


def format_device(
    index: int,
    props: DeviceProperties,
    driver_version: int,
    runtime_version: int,
) -> list[str]:
    """Return the report lines describing one device."""
    cores = cores_per_sm(props.major, props.minor)
    tex2d = props.max_texture_2d
    tex3d = props.max_texture_3d
    layered1d = props.max_texture_1d_layered
    layered2d = props.max_texture_2d_layered
    block = props.max_threads_dim
    grid = props.max_grid_size

    lines = [
        f'Device {index}: "{props.name}"',
        "  CUDA Driver Version / Runtime Version          "
        f"{format_version(driver_version)} / {format_version(runtime_version)}",
        f"  CUDA Capability Major/Minor version number:    {props.major}.{props.minor}",
        "  Total amount of global memory:                 %.0f MBytes (%d bytes)"
        % (props.total_global_mem / 1048576.0, props.total_global_mem),
        "  (%2d) Multiprocessors, (%3d) CUDA Cores/MP:     %d CUDA Cores"
        % (props.multi_processor_count, cores, cores * props.multi_processor_count),
        "  GPU Max Clock rate:                            %.0f MHz (%0.2f GHz)"
        % (props.clock_rate * 1e-3, props.clock_rate * 1e-6),
        "  Memory Clock rate:                             %.0f Mhz"
        % (props.memory_clock_rate * 1e-3),
        f"  Memory Bus Width:                              {props.memory_bus_width}-bit",
    ]
    if props.l2_cache_size:
        lines.append(
            f"  L2 Cache Size:                                 {props.l2_cache_size} bytes"
        )
    lines += [
        "  Maximum Texture Dimension Size (x,y,z)         "
        f"1D=({props.max_texture_1d}), 2D=({tex2d[0]}, {tex2d[1]}), "
        f"3D=({tex3d[0]}, {tex3d[1]}, {tex3d[2]})",
        "  Maximum Layered 1D Texture Size, (num) layers  "
        f"1D=({layered1d[0]}), {layered1d[1]} layers",
        "  Maximum Layered 2D Texture Size, (num) layers  "
        f"2D=({layered2d[0]}, {layered2d[1]}), {layered2d[2]} layers",
        f"  Total amount of constant memory:               {props.total_const_mem} bytes",
        f"  Total amount of shared memory per block:       {props.shared_mem_per_block} bytes",
        f"  Total number of registers available per block: {props.regs_per_block}",
        f"  Warp size:                                     {props.warp_size}",
        "  Maximum number of threads per multiprocessor:  "
        f"{props.max_threads_per_multiprocessor}",
        f"  Maximum number of threads per block:           {props.max_threads_per_block}",
        f"  Max dimension size of a thread block (x,y,z): ({block[0]}, {block[1]}, {block[2]})",
        f"  Max dimension size of a grid size    (x,y,z): ({grid[0]}, {grid[1]}, {grid[2]})",
        f"  Maximum memory pitch:                          {props.mem_pitch} bytes",
        f"  Texture alignment:                             {props.texture_alignment} bytes",
        "  Concurrent copy and kernel execution:          "
        f"{_yes_no(props.device_overlap)} with {props.async_engine_count} copy engine(s)",
        "  Run time limit on kernels:                     "
        f"{_yes_no(props.kernel_exec_timeout_enabled)}",
        f"  Integrated GPU sharing Host Memory:            {_yes_no(props.integrated)}",
        "  Support host page-locked memory mapping:       "
        f"{_yes_no(props.can_map_host_memory)}",
        f"  Alignment requirement for Surfaces:            {_yes_no(props.surface_alignment)}",
        "  Device has ECC support:                        "
        f"{'Enabled' if props.ecc_enabled else 'Disabled'}",
    ]
    if _ON_WINDOWS:
        mode = (
            "TCC (Tesla Compute Cluster Driver)"
            if props.tcc_driver
            else "WDDM (Windows Display Driver Model)"
        )
        lines.append(f"  CUDA Device Driver Mode (TCC or WDDM):         {mode}")
    lines += [
        "  Device supports Unified Addressing (UVA):      "
        f"{_yes_no(props.unified_addressing)}",
        "  Supports Cooperative Kernel Launch:            "
        f"{_yes_no(props.cooperative_launch)}",
        "  Supports MultiDevice Co-op Kernel Launch:      "
        f"{_yes_no(props.cooperative_multi_device_launch)}",
        "  Device PCI Domain ID / Bus ID / location ID:   "
        f"{props.pci_domain_id} / {props.pci_bus_id} / {props.pci_device_id}",
        "  Compute Mode:",
        f"     < {_compute_mode_text(props.compute_mode)} >",
    ]
    return lines


def _p2p_capable(props: DeviceProperties) -> bool:
    if props.major < 2:
        return False
    return props.tcc_driver if _ON_WINDOWS else True


def peer_access_lines(
    devices: Sequence[DeviceProperties], can_access_peer: PeerCheck
) -> list[str]:
    """Describe peer access between every ordered pair of peer-capable devices.

    ``can_access_peer(i, j)`` tells whether device ``i`` can access device ``j``.
    Nothing is reported unless at least two devices are capable.
    """
    if len(devices) < 2:
        return []
    capable = [i for i, props in enumerate(devices) if _p2p_capable(props)]
    if len(capable) < 2:
        return []
    return [
        f"> Peer access from {devices[i].name} (GPU{i}) -> "
        f"{devices[j].name} (GPU{j}) : {_yes_no(can_access_peer(i, j))}"
        for i in capable
        for j in capable
        if i != j
    ]


def profile_line(driver_version: int, runtime_version: int, device_count: int) -> str:
    """Return the one-line summary of versions and device count."""
    return (
        "deviceQuery, CUDA Driver = CUDART"
        f", CUDA Driver Version = {format_version(driver_version)}"
        f", CUDA Runtime Version = {format_version(runtime_version)}"
        f", NumDevs = {device_count}"
    )


def format_report(
    program: str,
    devices: Sequence[DeviceProperties],
    driver_version: int,
    runtime_version: int,
    can_access_peer: PeerCheck | None = None,
) -> str:
    """Return the full report text for the given devices."""
    if can_access_peer is None:
        can_access_peer = lambda i, j: False  # noqa: E731

    lines = [
        f"{program} Starting...",
        "",
        " CUDA Device Query (Runtime API) version (CUDART static linking)",
        "",
    ]
    if devices:
        lines.append(f"Detected {len(devices)} CUDA Capable device(s)")
    else:
        lines.append("There are no available device(s) that support CUDA")

    for index, props in enumerate(devices):
        lines.append("")
        lines += format_device(index, props, driver_version, runtime_version)

    lines += peer_access_lines(devices, can_access_peer)

    # Versions are only queried while walking the devices, so none means 0.
    shown_driver = driver_version if devices else 0
    shown_runtime = runtime_version if devices else 0
    lines += [
        "",
        profile_line(shown_driver, shown_runtime, len(devices)),
        "Result = PASS",
    ]
    return "\n".join(lines) + "\n"