from pathlib import Path

from pkganalyzer.fs_scan import find_usage_file, scan_share_tree
from pkganalyzer.usage import detect_fallback_packages, read_usage, synthesize_usage


def test_read_usage_escapes_contents(tmp_path):
	p = tmp_path / "usage"
	p.write_bytes(b'The package foo is "header-only":\r\n\r\n    find_package(foo CONFIG REQUIRED)\r\n')
	assert read_usage(str(p)) == 'The package foo is \\"header-only\\":\\r\\n\\r\\n    find_package(foo CONFIG REQUIRED)\\r\\n'


def test_first_usage_file_in_sorted_order(make_package):
	root = make_package("pkg", {"share/b/usage": "b", "share/a/usage": "a", "share/a/other": "x"})
	usage = find_usage_file(scan_share_tree(str(root)))
	assert usage is not None
	assert usage.endswith("usage")
	assert Path(usage).read_text() == "a"


def test_no_usage_file(make_package):
	root = make_package("pkg", {"share/a/usage.txt": "nope"})
	assert find_usage_file(scan_share_tree(str(root))) is None


def test_detect_fallback_packages():
	usage = "find_package(Boost REQUIRED)\\n    find_package(ZLIB REQUIRED)\\n find_package(Boost COMPONENTS x)\\n"
	assert detect_fallback_packages(usage) == {"Boost": [], "ZLIB": []}


def test_detect_fallback_needs_whitespace_after_name():
	assert detect_fallback_packages("find_package(Threads)\\n") == {}


def test_synthesize_usage():
	assert synthesize_usage("foo", "Foo", ["foo::a", "foo::b"]) == (
		"The package foo provides CMake targets:\\r\\n\\r\\n"
		"    find_package(Foo CONFIG REQUIRED)\\r\\n"
		"    target_link_libraries(main PRIVATE foo::a foo::b)\\r\\n"
	)
