"""
Unit tests for saved page discovery.
"""

from scholar_parser.utils.file_discovery import find_html_files


class TestFindHtmlFiles:
    """Tests for find_html_files function."""

    def test_directory_recursive(self, tmp_path):
        (tmp_path / "a.html").write_text("<html></html>")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.htm").write_text("<html></html>")
        (tmp_path / "notes.txt").write_text("not a page")

        files = find_html_files([tmp_path])
        assert [f.name for f in files] == ["a.html", "b.htm"]

    def test_explicit_file_any_extension(self, tmp_path):
        page = tmp_path / "page.txt"
        page.write_text("<html></html>")
        assert find_html_files([page]) == [page]

    def test_duplicates_removed(self, tmp_path):
        page = tmp_path / "a.html"
        page.write_text("<html></html>")
        assert find_html_files([tmp_path, page]) == [page]

    def test_limit(self, tmp_path):
        for name in ["a.html", "b.html", "c.html"]:
            (tmp_path / name).write_text("<html></html>")
        assert len(find_html_files([tmp_path], limit=2)) == 2

    def test_missing_path(self, tmp_path):
        assert find_html_files([tmp_path / "missing"]) == []
