"""Tests for the ViewService facade."""

import os
from types import SimpleNamespace

import pytest
from jinja2 import UndefinedError

from laraview import (
    CompileException,
    ConfigurationException,
    Container,
    Dispatcher,
    Filesystem,
    ViewNotFoundException,
    ViewService,
)
from laraview.view import Factory, FileViewFinder, View
from laraview.view.compilers import BladeCompiler
from laraview.view.engines import CompilerEngine, EngineResolver, FileEngine


class TestWiring:
    """Test the container bindings created at construction."""

    def test_returns_instance_of_container(self, blade):
        """The factory and the service expose the same container."""
        assert isinstance(blade.app, Container)
        assert blade.render().get_container() is blade.app

    def test_returns_instance_of_filesystem(self, blade):
        """Test files binding."""
        assert isinstance(blade.app["files"], Filesystem)
        assert blade.files is blade.app["files"]

    def test_returns_instance_of_event_dispatcher(self, blade):
        """Test events binding."""
        assert isinstance(blade.app["events"], Dispatcher)

    def test_returns_instance_of_blade_compiler(self, blade, cache_dir):
        """Test compiler binding and its cache path."""
        assert isinstance(blade.app["compiler"], BladeCompiler)
        assert blade.compiler.cache_path == str(cache_dir)

    def test_returns_instance_of_resolvers(self, blade):
        """Both engines are registered on the resolver."""
        resolver = blade.app["engine.resolver"]
        assert isinstance(resolver, EngineResolver)
        assert isinstance(resolver.resolve("file"), FileEngine)
        assert isinstance(resolver.resolve("blade"), CompilerEngine)

    def test_returns_instance_of_view_finder(self, blade, views_dir):
        """Test finder binding and its paths."""
        assert isinstance(blade.app["view.finder"], FileViewFinder)
        assert blade.finder.get_paths() == [str(views_dir.resolve())]

    def test_returns_instance_of_the_view_factory(self, blade):
        """render() without arguments returns the factory."""
        assert isinstance(blade.render(), Factory)

    def test_returns_instance_of_the_view(self, blade):
        """render(name) returns a lazy view."""
        view = blade.render("index")
        assert isinstance(view, View)
        assert view.name == "index"

    def test_singletons_are_lazy(self, cache_dir, views_dir):
        """Nothing is instantiated until first use."""
        blade = ViewService(str(views_dir), str(cache_dir))
        bindings = blade.app.get_bindings()
        assert set(bindings) == {
            "files", "events", "compiler", "engine.resolver", "view.finder", "view.factory",
        }
        assert not any(info["instantiated"] for info in bindings.values())

    def test_view_paths_accepts_single_path_or_list(self, cache_dir, views_dir, tmp_path):
        """A single path is wrapped; lists keep their order."""
        single = ViewService(views_dir, cache_dir)
        assert single.view_paths == (views_dir,)

        several = ViewService([str(tmp_path), str(views_dir)], str(cache_dir))
        assert several.finder.get_paths() == [str(tmp_path.resolve()), str(views_dir.resolve())]

    def test_construction_does_not_touch_disk(self, tmp_path):
        """Missing directories only surface on first render."""
        blade = ViewService(str(tmp_path / "nope"), str(tmp_path / "cache"))
        assert not (tmp_path / "cache").exists()

        with pytest.raises(ViewNotFoundException):
            blade.render("index")


class TestInjection:
    """Test caller-supplied collaborators."""

    def test_two_services_are_independent(self, views_dir, cache_dir):
        """Separate services get separate containers and factories."""
        first = ViewService(str(views_dir), str(cache_dir))
        second = ViewService(str(views_dir), str(cache_dir))

        assert first.app is not second.app
        assert first.render() is not second.render()

        first.render().share("user", {"name": "Martin"})
        assert second.render().shared("user") is None

    def test_shared_container(self, views_dir, cache_dir):
        """A shared container keeps its files and events bindings."""
        container = Container()
        first = ViewService(str(views_dir), str(cache_dir), container=container)
        files = first.files
        events = first.events

        second = ViewService(str(views_dir), str(cache_dir), container=container)

        assert second.app is container
        assert second.files is files
        assert second.events is events
        assert first.render() is second.render()

    def test_supplied_event_dispatcher_is_used(self, views_dir, cache_dir):
        """The given dispatcher instance is registered as-is."""
        events = Dispatcher()
        blade = ViewService(str(views_dir), str(cache_dir), events=events)

        assert blade.events is events
        assert blade.render().get_dispatcher() is events

    def test_supplied_filesystem_is_used(self, views_dir, cache_dir):
        """The given filesystem instance is registered as-is."""
        files = Filesystem()
        blade = ViewService(str(views_dir), str(cache_dir), files=files)

        assert blade.files is files
        assert blade.compiler.files is files


class TestRender:
    """Test rendering through the facade."""

    def test_render_without_arguments_is_idempotent(self, blade):
        """Repeated calls hand out the one factory."""
        assert blade.render() is blade.render()
        assert blade.factory is blade.render()

    def test_returns_rendered_view(self, blade):
        """Data can be passed as dict, object or through with_()."""
        user = SimpleNamespace(name="Sebastian")

        assert str(blade.render("index", {"user": user})) == "<p>Hallo Sebastian</p>"
        assert str(blade.render("index", {"user": {"name": "Sebastian"}})) == "<p>Hallo Sebastian</p>"
        assert str(blade.render("index").with_("user", user)) == "<p>Hallo Sebastian</p>"

    def test_rendering_is_deterministic(self, blade):
        """Identical data renders identical output."""
        data = {"user": {"name": "Sebastian"}}
        outputs = {str(blade.render("index", data)) for _ in range(3)}
        assert outputs == {"<p>Hallo Sebastian</p>"}

    def test_data_overrides_merge_data(self, blade):
        """Keys in data win over keys in merge_data."""
        view = blade.render(
            "index",
            {"user": {"name": "Sebastian"}},
            {"user": {"name": "Martin"}, "title": "Home"},
        )
        assert view.get_data() == {"user": {"name": "Sebastian"}, "title": "Home"}
        assert str(view) == "<p>Hallo Sebastian</p>"

    def test_determines_if_the_view_exists(self, blade):
        """exists() probes without raising."""
        assert blade.exists("index") is True
        assert blade.exists("test") is False
        assert blade.render().exists("test") is False

    def test_missing_view_raises(self, blade):
        """Unknown view names raise ViewNotFoundException."""
        with pytest.raises(ViewNotFoundException) as exc_info:
            blade.render("missing")

        assert exc_info.value.view == "missing"
        assert exc_info.value.status_code == 404

    def test_views_outside_the_view_paths_are_not_found(self, blade, tmp_path):
        """A name spelling an absolute path does not escape the view paths."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.blade.html").write_text("SECRET {{ 1 + 1 }}", encoding="utf-8")
        name = str(outside / "secret").replace(os.sep, ".")

        assert blade.exists(name) is False

        with pytest.raises(ViewNotFoundException):
            blade.render(name)

    def test_sharing_variables_with_all_views(self, blade):
        """Shared data reaches every view without passing it explicitly."""
        blade.render().share("user", {"name": "Martin"})

        assert str(blade.render("index")) == "<p>Hallo Martin</p>"
        assert str(blade.render("composer")) == "<p>Hallo Martin</p>"

    def test_works_with_composer(self, blade):
        """A composer injects data right before the view renders."""
        def compose(view):
            view.with_("user", SimpleNamespace(name="Martin"))

        blade.render().composer("composer", compose)

        assert str(blade.render("composer")) == "<p>Hallo Martin</p>"

    def test_undefined_variables_propagate(self, blade):
        """Template runtime errors reach the caller unchanged."""
        with pytest.raises(UndefinedError):
            str(blade.render("index"))

    def test_compile_errors_propagate(self, make_view, cache_dir):
        """Invalid template syntax raises CompileException."""
        make_view("broken.blade.html", "<p>{% if user %}</p>\n")
        blade = ViewService(str(make_view.root), str(cache_dir))

        view = blade.render("broken")
        with pytest.raises(CompileException):
            view.render()

    def test_unwritable_cache_path_raises(self, make_view, tmp_path):
        """A cache path that cannot be created is a configuration error."""
        make_view("hello.blade.html", "hello\n")
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        blade = ViewService(str(make_view.root), str(blocker))

        with pytest.raises(ConfigurationException):
            str(blade.render("hello"))

    def test_dotted_names_resolve_to_subdirectories(self, blade):
        """'pages.home' and 'pages/home' find pages/home.blade.html."""
        assert str(blade.render("pages.home", {"title": "Welcome"})) == "<h1>Welcome</h1>"
        assert str(blade.render("pages/home", {"title": "Welcome"})) == "<h1>Welcome</h1>"

    def test_static_views_are_not_evaluated(self, blade):
        """Plain .html views go through the file engine."""
        assert str(blade.render("static", {"user": {"name": "x"}})) == "<p>{{ user.name }}</p>\n"
