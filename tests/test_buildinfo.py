import pytest

from hecore.buildinfo import detect_build, library_filename, stricmp, strnicmp


def test_linux_x86_64():
    info = detect_build("Linux", "x86_64")
    assert info.os_name == "Linux"
    assert info.arch == "x86_64"
    assert info.lib_prefix == "lib"
    assert info.lib_suffix == ".so"
    assert info.steamquery_os == "l"


def test_freebsd_arch_names():
    assert detect_build("FreeBSD", "amd64").arch == "freebsd_x86_64"
    assert detect_build("FreeBSD", "i386").arch == "freebsd_i386"
    assert detect_build("FreeBSD", "i386").cpu_string == "i386"


def test_other_linux_machines():
    assert detect_build("Linux", "aarch64").arch == "aarch64"
    assert detect_build("Linux", "armv7l").arch == "arm"
    assert detect_build("Linux", "ppc64le").arch == "ppc"
    assert detect_build("Linux", "riscv64").arch == "Unknown"


def test_darwin():
    info = detect_build("Darwin", "arm64")
    assert info.os_name == "MacOSX"
    assert info.cpu_string == "universal"
    assert info.arch == "mac"
    assert info.lib_suffix == ".dylib"


def test_windows():
    info = detect_build("Windows", "AMD64")
    assert info.cpu_string == "x64"
    assert info.lib_prefix == ""
    assert info.lib_suffix == ".dll"
    assert info.build_string.startswith("Win32")


def test_unknown_system_rejected():
    with pytest.raises(ValueError):
        detect_build("Plan9", "x86_64")


def test_detect_running_platform_is_consistent():
    info = detect_build()
    assert library_filename(info, "core").startswith(info.lib_prefix)
    assert library_filename(info, "core").endswith(info.lib_suffix)


def test_library_filename():
    assert library_filename(detect_build("Linux", "x86_64"), "curl") == "libcurl.so"
    assert library_filename(detect_build("Windows", "x86"), "curl") == "curl.dll"


def test_stricmp_ignores_case():
    assert stricmp("Hello", "hELLO") == 0
    assert stricmp("apple", "Banana") < 0
    assert stricmp("Cherry", "banana") > 0


def test_stricmp_shorter_sorts_first():
    assert stricmp("abc", "ABCD") < 0
    assert stricmp("abcd", "ABC") > 0


def test_stricmp_is_antisymmetric():
    pairs = [("a", "B"), ("zeta", "Alpha"), ("same", "SAME")]
    for a, b in pairs:
        assert (stricmp(a, b) > 0) == (stricmp(b, a) < 0)


def test_strnicmp_limits_length():
    assert strnicmp("PREFIX-one", "prefix-two", 7) == 0
    assert strnicmp("PREFIX-one", "prefix-two", 8) < 0
    assert strnicmp("abc", "xyz", 0) == 0
    with pytest.raises(ValueError):
        strnicmp("a", "b", -1)