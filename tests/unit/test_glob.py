import pytest
from virtfs._glob import GlobMatcher


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("/newfile.txt", "/newfile.txt"),
        ("newfile.txt", "/newfile.txt"),
        ("/remove/file*", "/remove/file1.txt"),
        ("*.txt", "/a.txt"),
        ("/sub/?.txt", "/sub/b.txt"),
        ("/sub/[abc].txt", "/sub/c.txt"),
        ("**/*.txt", "/a.txt"),
        ("**/*.txt", "/sub/nested/c.txt"),
        ("/sub/**", "/sub/nested/c.txt"),
        ("/sub/**/c.txt", "/sub/c.txt"),
        ("/sub/**/**/c.txt", "/sub/x/y/c.txt"),
        ("\\sub\\*.txt", "/sub/b.txt"),
    ],
)
def test_matches(pattern, path):
    assert GlobMatcher(pattern).match(path)


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("/newfile.txt", "/other.txt"),
        ("*.txt", "/sub/b.txt"),
        ("/sub/*", "/sub/nested/c.txt"),
        ("/sub/**", "/sub"),
        ("/sub/?.txt", "/sub/bb.txt"),
        ("/a.txt", "/a.txt/extra"),
        ("", "/a.txt"),
    ],
)
def test_does_not_match(pattern, path):
    assert not GlobMatcher(pattern).match(path)


def test_case_sensitive_by_default():
    assert not GlobMatcher("/README.md").match("/readme.md")


def test_case_insensitive():
    matcher = GlobMatcher("/Docs/*.MD", case_sensitive=False)
    assert matcher.match("/docs/readme.md")
    assert matcher.match("/DOCS/README.md")


def test_match_any():
    matcher = GlobMatcher("/remove/file*")
    assert matcher.match_any(["/keep.txt", "/remove/file2.txt"])
    assert not matcher.match_any(["/keep.txt"])
    assert not matcher.match_any([])
