"""Tests for the file view finder."""

import os

import pytest

from laraview.exceptions import ViewNotFoundException
from laraview.filesystem import Filesystem
from laraview.view import FileViewFinder


@pytest.fixture
def finder(make_view):
    make_view("index.blade.html", "blade")
    return FileViewFinder(Filesystem(), [make_view.root])


class TestFind:
    """Test name resolution."""

    def test_finds_view_by_name(self, finder, make_view):
        """Plain names resolve against the locations."""
        assert finder.find("index") == str(make_view.root / "index.blade.html")

    def test_dotted_names_map_to_directories(self, finder, make_view):
        """'pages.home' resolves to pages/home.<ext>."""
        path = make_view(os.path.join("pages", "home.html"), "home")

        assert finder.find("pages.home") == str(path)

    def test_extension_priority(self, finder, make_view):
        """blade.html wins over html within one location."""
        make_view("index.html", "plain")

        assert finder.find("index").endswith("index.blade.html")

    def test_first_location_wins(self, tmp_path, make_view):
        """Earlier locations shadow later ones."""
        make_view("index.html", "first")
        other = tmp_path / "other"
        other.mkdir()
        (other / "index.html").write_text("second", encoding="utf-8")
        (other / "extra.html").write_text("extra", encoding="utf-8")

        finder = FileViewFinder(Filesystem(), [make_view.root, other])

        assert finder.find("index") == str(make_view.root / "index.html")
        assert finder.find("extra") == str(other / "extra.html")

    def test_missing_view_raises(self, finder):
        """Misses raise ViewNotFoundException carrying the name."""
        with pytest.raises(ViewNotFoundException, match=r"View \[missing\] not found") as info:
            finder.find("missing")

        assert info.value.view == "missing"

    def test_results_are_cached_until_flush(self, finder, make_view):
        """A removed file keeps resolving until the cache is flushed."""
        path = finder.find("index")
        os.remove(path)

        assert finder.find("index") == path
        assert finder.get_views() == {"index": path}

        finder.flush()

        with pytest.raises(ViewNotFoundException):
            finder.find("index")

    def test_paths_are_made_absolute(self, monkeypatch, make_view):
        """Relative locations are resolved against the working directory."""
        monkeypatch.chdir(make_view.root.parent)

        finder = FileViewFinder(Filesystem(), ["views"])

        assert [os.path.realpath(path) for path in finder.get_paths()] == [
            os.path.realpath(make_view.root)
        ]

    @pytest.mark.parametrize("name", [".index", "index.", "pages..home", "."])
    def test_empty_segments_are_rejected(self, finder, name):
        """Leading, trailing and doubled dots are invalid names."""
        with pytest.raises(ViewNotFoundException, match="invalid name"):
            finder.find(name)

    def test_absolute_names_stay_inside_locations(self, finder, tmp_path):
        """A dotted absolute path does not reach files outside the locations."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.blade.html").write_text("SECRET", encoding="utf-8")
        name = str(outside / "secret").replace(os.sep, ".")

        with pytest.raises(ViewNotFoundException):
            finder.find(name)

    def test_symlinks_out_of_locations_are_ignored(self, finder, tmp_path, make_view):
        """Files reached through a link leaving the location are not found."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.blade.html").write_text("SECRET", encoding="utf-8")
        os.symlink(outside, make_view.root / "linked")

        with pytest.raises(ViewNotFoundException, match=r"View \[linked.secret\] not found"):
            finder.find("linked.secret")


class TestLocations:
    """Test location management."""

    def test_add_location(self, finder, tmp_path):
        """add_location() appends."""
        extra = tmp_path / "extra"
        finder.add_location(extra)

        assert finder.get_paths()[-1] == str(extra)

    def test_prepend_location(self, finder, tmp_path, make_view):
        """prepend_location() takes precedence over existing paths."""
        first = tmp_path / "first"
        first.mkdir()
        (first / "index.blade.html").write_text("first", encoding="utf-8")

        finder.prepend_location(first)

        assert finder.get_paths()[0] == str(first)
        assert finder.find("index") == str(first / "index.blade.html")

    def test_add_extension_takes_priority(self, finder, make_view):
        """A new extension is tried first."""
        make_view("index.txt", "text")

        finder.add_extension("txt")

        assert finder.get_extensions() == ["txt", "blade.html", "html", "css"]
        assert finder.find("index").endswith("index.txt")

    def test_add_existing_extension_moves_it(self, finder):
        """Re-adding an extension does not duplicate it."""
        finder.add_extension("html")

        assert finder.get_extensions() == ["html", "blade.html", "css"]


class TestNamespaces:
    """Test namespaced view names."""

    @pytest.fixture
    def mail(self, tmp_path):
        path = tmp_path / "mail"
        path.mkdir()
        (path / "welcome.html").write_text("welcome", encoding="utf-8")
        return path

    def test_namespaced_view(self, finder, mail):
        """'mail::welcome' resolves through the hint paths."""
        finder.add_namespace("mail", str(mail))

        assert finder.has_hint_information("mail::welcome")
        assert finder.find("mail::welcome") == str(mail / "welcome.html")

    def test_unknown_namespace(self, finder):
        """Namespaces without hints are reported."""
        with pytest.raises(ViewNotFoundException, match=r"No hint path defined for \[mail\]"):
            finder.find("mail::welcome")

    @pytest.mark.parametrize("name", ["::welcome", "mail::", "a::b::c"])
    def test_invalid_names(self, finder, name):
        """Malformed namespaced names are rejected."""
        with pytest.raises(ViewNotFoundException, match="invalid name"):
            finder.find(name)

    def test_namespace_missing_view(self, finder, mail):
        """Misses name the full namespaced view."""
        finder.add_namespace("mail", mail)

        with pytest.raises(ViewNotFoundException, match=r"View \[mail::missing\] not found"):
            finder.find("mail::missing")

    def test_hint_ordering(self, finder, tmp_path, mail):
        """add, prepend and replace adjust the hint list."""
        other = tmp_path / "other"

        finder.add_namespace("mail", mail)
        finder.add_namespace("mail", other)
        assert finder.get_hints()["mail"] == [str(mail), str(other)]

        finder.prepend_namespace("mail", [other])
        assert finder.get_hints()["mail"] == [str(other), str(mail), str(other)]

        finder.replace_namespace("mail", other)
        assert finder.get_hints()["mail"] == [str(other)]
