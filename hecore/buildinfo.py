"""Build and platform description and case-insensitive string comparison."""

from __future__ import annotations

import platform
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(frozen=True)
class BuildInfo:
    """Names describing the platform a build targets."""

    os_name: str
    build_string: str
    cpu_string: str
    arch: str
    lib_directory: str
    lib_prefix: str
    lib_suffix: str
    steamquery_os: str


def _windows(machine: str) -> BuildInfo:
    if machine in ("x86", "i386", "i486", "i586", "i686"):
        cpu = arch = "x86"
    elif machine in ("amd64", "x86_64", "x64"):
        cpu = arch = "x64"
    elif machine == "alpha":
        cpu = arch = "axp"
    else:
        cpu = arch = "NON-WIN32"
    build = "Win32 DEBUG" if __debug__ else "Win32 RELEASE"
    return BuildInfo("Windows", build, cpu, arch, "libs", "", ".dll", "w")


def _unix(system: str, machine: str) -> BuildInfo:
    freebsd = system == "freebsd"
    android = system == "android"
    name = "FreeBSD" if freebsd else "Linux"
    if machine in ("i386", "i486", "i586", "i686", "x86"):
        cpu = "i386"
        arch = "freebsd_i386" if freebsd else "i386"
    elif machine in ("x86_64", "amd64"):
        cpu = "x86_64"
        arch = "freebsd_x86_64" if freebsd else "x86_64"
    elif machine.startswith(("ppc", "powerpc")):
        cpu = arch = "ppc"
    elif machine.startswith("alpha"):
        cpu = arch = "axp"
    elif machine in ("aarch64", "arm64"):
        cpu = arch = "aarch64"
    elif machine.startswith("arm"):
        cpu = "arm"
        arch = "android_armeabi-v7a" if android else "arm"
    elif machine.startswith("mips"):
        cpu = "mips"
        arch = "android_mips" if android else "mips"
    else:
        cpu = arch = "Unknown"
    return BuildInfo(name, name, cpu, arch, "libs", "lib", ".so", "l")


def detect_build(system: str | None = None, machine: str | None = None) -> BuildInfo:
    """Describe the platform named by ``system``/``machine``, or the running one."""
    system = (system if system is not None else platform.system()).lower()
    machine = (machine if machine is not None else platform.machine()).lower()
    if system == "windows":
        return _windows(machine)
    if system in ("linux", "freebsd", "android"):
        return _unix(system, machine)
    if system == "darwin":
        return BuildInfo("MacOSX", "MacOSX", "universal", "mac", "libs", "lib", ".dylib", "o")
    raise ValueError(f"unsupported platform {system!r}")


def library_filename(info: BuildInfo, name: str) -> str:
    """The shared-library file name for ``name`` on ``info``'s platform."""
    return f"{info.lib_prefix}{name}{info.lib_suffix}"


def _fold(char: str) -> str:
    return char.lower() if char.isascii() else char


def _compare(a: str, b: str) -> int:
    for ca, cb in zip_longest(a, b, fillvalue=""):
        fa, fb = _fold(ca), _fold(cb)
        if fa != fb:
            return (ord(fa) if fa else 0) - (ord(fb) if fb else 0)
    return 0


def stricmp(a: str, b: str) -> int:
    """Compare ignoring ASCII case: negative, zero or positive."""
    return _compare(a, b)


def strnicmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters ignoring ASCII case."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _compare(a[:n], b[:n])