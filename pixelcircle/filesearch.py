"""Locate companion data files in a fixed list of directories near the working directory."""

from __future__ import annotations

_EXE = "<executable_name>"

_CATEGORIES = (
    "0_Simple",
    "1_Utilities",
    "2_Graphics",
    "3_Imaging",
    "4_Finance",
    "5_Simulations",
    "6_Advanced",
    "7_CUDALibraries",
    "8_Android",
)


def _far(up: str, *, full: bool) -> list[str]:
    """Search entries for a directory three or more levels up the tree."""
    entries = [up]
    entries += [
        f"{up}{root}/{_EXE}/{sub}"
        for root in ("src", "sandbox")
        for sub in ("", "data/", "src/", "inc/")
    ]
    entries += [f"{up}{cat}/{_EXE}/data/" for cat in _CATEGORIES]
    if full:
        entries += [f"{up}{cat}/{_EXE}/" for cat in _CATEGORIES]
    entries += [f"{up}samples/{_EXE}/data/", f"{up}common/", f"{up}common/data/"]
    if full:
        entries.append(f"{up}data/")
    return entries


_SEARCH_PATHS: tuple[str, ...] = (
    "./",
    f"./{_EXE}_data_files/",
    "./common/",
    "./common/data/",
    "./data/",
    "./src/",
    f"./src/{_EXE}/data/",
    "./inc/",
    *(f"./{cat}/" for cat in _CATEGORIES),
    "./samples/",
    *(f"./{cat}/{_EXE}/data/" for cat in _CATEGORIES[:7]),
    f"./7_CUDALibraries/{_EXE}/",
    f"./7_CUDALibraries/{_EXE}/data/",
    "../",
    "../common/",
    "../common/data/",
    "../data/",
    "../src/",
    "../inc/",
    *(f"../{cat}/{_EXE}/data/" for cat in _CATEGORIES),
    f"../samples/{_EXE}/data/",
    "../../",
    "../../common/",
    "../../common/data/",
    "../../data/",
    "../../src/",
    "../../inc/",
    f"../../sandbox/{_EXE}/data/",
    *(f"../../{cat}/{_EXE}/data/" for cat in _CATEGORIES),
    f"../../samples/{_EXE}/data/",
    *_far("../../../", full=True),
    *_far("../../../../", full=True),
    *_far("../../../../../", full=False),
)


def executable_name(executable_path: str | None) -> str | None:
    """Return the last component of ``executable_path``; None when no path is given."""
    if executable_path is None:
        return None
    return executable_path.rpartition("/")[2]


def search_paths(executable_path: str | None = None) -> list[str]:
    """Return the directories searched, in order, with the executable name filled in.

    Entries that need the executable name are left out when no path is given.
    """
    name = executable_name(executable_path)
    paths = []
    for entry in _SEARCH_PATHS:
        if _EXE in entry:
            if name is None:
                continue
            entry = entry.replace(_EXE, name, 1)
        paths.append(entry)
    return paths


def find_file_path(filename: str, executable_path: str | None = None) -> str | None:
    """Return the first searched path at which ``filename`` can be opened, or None."""
    for directory in search_paths(executable_path):
        candidate = directory + filename
        try:
            with open(candidate, "rb"):
                pass
        except OSError:
            continue
        return candidate
    return None