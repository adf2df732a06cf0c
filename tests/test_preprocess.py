"""Tests for preprocessor dispatch and the lazy registry (hbassets.preprocess)."""

import pytest

from hbassets.config import Config
from hbassets.errors import MissingPreprocessorError
from hbassets.paths import classify
from hbassets.preprocess import PreprocessDispatcher, PreprocessorRegistry, default_registry
from hbassets.preprocess.haml import HamlPreprocessor
from hbassets.preprocess.slim import SlimPreprocessor
from tests.infrastructure import RecordingPreprocessor, fake_registry


class TestDispatch:

    def test_plain_template_is_returned_as_is(self):
        dispatcher = PreprocessDispatcher(Config(), fake_registry())
        tp = classify("/app/templates/w.hbs", "templates/w", Config())

        assert dispatcher.render("<p>{{x}}</p>", tp) == "<p>{{x}}</p>"
        assert RecordingPreprocessor.seen == []

    def test_plain_template_needs_no_library(self):
        """Nothing is probed when no preprocessor applies."""
        dispatcher = PreprocessDispatcher(Config(), fake_registry(haml=False, slim=False))
        tp = classify("/app/templates/w.hbs", "templates/w", Config())
        assert dispatcher.render("x", tp) == "x"

    def test_haml_gets_haml_options_and_locals(self):
        config = Config(haml_options={"attr_wrapper": '"'}, slim_options={"pretty": True})
        dispatcher = PreprocessDispatcher(config, fake_registry())
        tp = classify("/app/templates/w.hamlbars", "templates/w", config)

        out = dispatcher.render("%p {{x}}\n", tp, scope="SCOPE", locals={"user": "bob"})

        assert out == "<!-- %p {{x}} -->"
        assert RecordingPreprocessor.seen == [{
            "source": "%p {{x}}\n",
            "scope": "SCOPE",
            "locals": {"user": "bob"},
            "options": {"attr_wrapper": '"'},
        }]

    def test_slim_gets_slim_options(self):
        config = Config(haml_options={"a": 1}, slim_options={"pretty": True})
        dispatcher = PreprocessDispatcher(config, fake_registry())
        tp = classify("/app/templates/w.slimbars", "templates/w", config)

        dispatcher.render("p {{x}}", tp)

        assert RecordingPreprocessor.seen[0]["options"] == {"pretty": True}

    def test_missing_haml_library(self):
        dispatcher = PreprocessDispatcher(Config(), fake_registry(haml=False))
        tp = classify("/app/templates/w.hamlbars", "templates/w", Config())

        with pytest.raises(MissingPreprocessorError) as exc:
            dispatcher.render("%p", tp)

        assert exc.value.preprocessor == "haml"
        assert exc.value.library == "hbassets_missing_haml_backend"
        assert "haml" in str(exc.value)
        assert RecordingPreprocessor.seen == []

    def test_missing_slim_does_not_affect_haml(self):
        dispatcher = PreprocessDispatcher(Config(), fake_registry(slim=False))
        haml = classify("/app/t/a.hamlbars", "t/a", Config())
        slim = classify("/app/t/b.slimbars", "t/b", Config())

        assert dispatcher.render("%p", haml) == "<!-- %p -->"
        with pytest.raises(MissingPreprocessorError):
            dispatcher.render("p", slim)


class TestRegistry:

    def test_builtin_preprocessors_registered(self):
        assert default_registry.names() == ["haml", "slim"]

    def test_builtin_classes_resolve_without_backends(self):
        """Modules import lazily; backing libraries are only needed in render()."""
        assert default_registry.resolve("haml") is HamlPreprocessor
        assert default_registry.resolve("slim") is SlimPreprocessor

    def test_probe_reports_flags(self):
        registry = fake_registry(haml=True, slim=False)
        assert registry.probe() == {"haml": True, "slim": False}

    def test_availability_is_cached(self, monkeypatch):
        registry = fake_registry()
        assert registry.is_available("haml")

        import hbassets.preprocess.registry as reg_mod
        monkeypatch.setattr(reg_mod, "_library_present", lambda lib: False)
        assert registry.is_available("haml")

    def test_unknown_preprocessor(self):
        with pytest.raises(KeyError):
            PreprocessorRegistry().resolve("pug")

    def test_class_must_exist(self):
        registry = PreprocessorRegistry()
        registry.register_lazy(name="x", module="tests.infrastructure.testing_utils", class_name="Nope", libraries=[])
        with pytest.raises(RuntimeError):
            registry.resolve("x")

    def test_class_must_be_preprocessor(self):
        registry = PreprocessorRegistry()
        registry.register_lazy(name="x", module="tests.infrastructure.testing_utils", class_name="StubCompiler", libraries=[])
        with pytest.raises(TypeError):
            registry.resolve("x")

    def test_reregistration_resets_availability(self):
        registry = fake_registry(haml=False)
        assert not registry.is_available("haml")
        registry.register_lazy(
            name="haml", module="tests.infrastructure.testing_utils",
            class_name="RecordingPreprocessor", libraries=["json"],
        )
        assert registry.is_available("haml")
