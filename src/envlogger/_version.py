"""
Version information for envlogger.

This file is the canonical source for version numbers.
The __version__ string appends release metadata to the base version
(branch, build number, date, commit hash); it is set by hand when a
release is cut.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 2.2.0-beta_main_7-20261016-1f0c2ab
"""

# Version components - edit these for version bumps
MAJOR = 2
MINOR = 2
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", etc.

# Set by hand at release time; keep in step with the components above
__version__ = "2.2.0-beta_main_7-20261016-1f0c2ab"
__app_name__ = "envlogger"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    - Main branch: 2.2.0-beta_main_7-20261016-hash -> 2.2.0b0
    - Dev branch: 2.2.0-beta_dev_7-20261016-hash -> 2.2.0b0.dev7
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"

    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)

    if "_" not in __version__:
        return base

    parts = __version__.split("_")
    branch = parts[1] if len(parts) > 1 else "unknown"

    if branch == "main":
        return base
    build_info = "_".join(parts[2:]) if len(parts) > 2 else ""
    build_num = build_info.split("-")[0] if "-" in build_info else "0"
    return f"{base}.dev{build_num}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
