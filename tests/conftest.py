from pathlib import Path

import pytest

from hbassets.config import configure
from tests.infrastructure import StubCompiler, RecordingPreprocessor, write_template


@pytest.fixture(autouse=True)
def _reset_process_config(monkeypatch):
    # every test starts from default process-wide config
    monkeypatch.delenv("HBASSETS_CONFIG", raising=False)
    configure(None)
    RecordingPreprocessor.seen.clear()
    yield
    configure(None)


@pytest.fixture
def stub_compiler() -> StubCompiler:
    return StubCompiler()


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Minimal project: a couple of templates under templates/."""
    root = tmp_path
    write_template(root, "templates/widget.hbs", "<div>{{name}}</div>\n")
    write_template(root, "templates/_row.hbs", "<tr>{{cell}}</tr>\n")
    write_template(root, "templates/ember/widget.ember.hbs", "<p>{{view}}</p>\n")
    return root

