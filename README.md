# pixelcircle

`pixelcircle` counts how many unit pixels a circle of a given radius covers
and reports the count modulo `k`. Column `x` of one quadrant holds
`ceil(sqrt(r*r - x*x))` pixels, and the circle holds four quadrants.
Several counting strategies are provided, and all of them give the same
answer:

- `count_naive(radius, k)`: a single column-by-column sweep,
- `count_strided(radius, k, workers)`: columns dealt round-robin to workers,
- `count_chunked(radius, k, workers)`: columns handed out in fixed chunks,
- `count_octant(radius, k, workers)`: one octant, its edge found by binary
  search, columns dealt round-robin,
- `count_partitioned(radius, k, workers)`: one octant split into contiguous
  blocks per worker,
- `count_hybrid(radius, k, ranks, threads)`: one octant split into blocks per
  rank, and each block split again per thread.

The package also holds some smaller utilities:

- greeting lines from a team of threads,
- parsing of `-name=value` command-line arguments,
- a search for companion data files along a fixed list of directories,
- GPU architecture tables and device selection helpers,
- a formatter for device-query reports.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Count the pixels of a circle with radius `RADIUS`, modulo `K`:

```
pixelcircle RADIUS K
```

For example, `pixelcircle 5 100` prints `88`. Options:

- `--method {naive,strided,chunked,octant,partitioned,hybrid}` picks the
  strategy (default `partitioned`),
- `--workers N` sets the number of workers, or of ranks for `hybrid`
  (default: the number of usable CPUs, or 1 rank for `hybrid`),
- `--threads N` sets the threads per rank for `hybrid` (default: the number
  of usable CPUs).

Anything but exactly two numbers prints `must provide exactly 2 arguments!`
and exits with status 1; a negative radius, a `k` below 1 or a worker count
below 1 also exits with status 1.

Print greetings from threads:

```
pixelcircle-hello pthread N      # create N threads one at a time
pixelcircle-hello omp [--threads N]
pixelcircle-hello hybrid [--threads N]
```

`pthread` prints `In main: creating thread T` before each thread's
`Hello, thread #T!`. `omp` prints `Hello: thread T/N` from each thread of a
team; `hybrid` prints `Hello HOST: rank 0/1, thread T/N` with the local host
name. Lines appear in the order the threads produce them.

## Library use

```python
from pixelcircle.pixels import count_naive, count_octant, count_hybrid

count_naive(5, 100)                       # 88
count_octant(5, 100, workers=4)           # 88
count_hybrid(5, 100, ranks=2, threads=3)  # 88
```

`octant_limit(radius)` returns `ceil(radius / sqrt(2))`, the number of
columns before the 45° line. `partition(limit, size, rank)` returns the
`range` one worker handles: each gets `limit // size` columns and the last
one also takes the rest. Invalid arguments raise `ValueError`.

`pixelcircle.hello` offers `thread_hello_lines(num_threads)`,
`team_hello_lines(num_threads)` and
`hybrid_hello_lines(hostname, rank, ranks, num_threads)`, each returning the
greeting lines as a list.

`pixelcircle.cmdline` reads arguments matched without regard to case after
leading dashes are removed; the first element of `argv` is the program name:

- `check_flag(argv, name)` tells whether `name` appears as a whole flag,
- `argument_int`, `argument_float` and `argument_string` return the value of
  the last argument that starts with `name` (0, 0.0 or None when absent),
- `argument_value(argv, name, convert)` converts the value of the first
  matching argument,
- `strip_delimiter` and `file_extension` are the string helpers behind them.

`pixelcircle.filesearch` offers `search_paths(executable_path)`, the ordered
list of relative directories searched, with the executable's name filled in,
and `find_file_path(filename, executable_path)`, which returns the first
path there at which the file can be opened, or None.

`pixelcircle.gpuarch` describes devices with the `DeviceProperties`
dataclass and the `ComputeMode` enum:

- `cores_per_sm(major, minor)` looks up cores per multiprocessor; an unknown
  capability gives a `RuntimeWarning` and the newest known value,
- `max_gflops_device(devices)` returns the index of the usable device with
  the highest estimated throughput, raising `ValueError` when there is none,
- `supports_capability(props, major, minor)` compares compute capabilities,
- `ftoi(value)` rounds halves away from zero.

`pixelcircle.devicequery` turns `DeviceProperties` into report text:
`format_report(program, devices, driver_version, runtime_version,
can_access_peer)` builds the whole report, and `format_device`,
`peer_access_lines`, `profile_line` and `format_version` build its parts.

## What it does not do

`pixelcircle` does not talk to GPUs. It does not detect devices, read their
properties or test peer access: the device-report helpers only format and
compare the `DeviceProperties` values you give them. There is no lookup of
GPU runtime status codes. The parallel counting strategies run their
workers one after another in a single process; they reproduce how the work
is split, not a distributed run.