import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under ``tmp_path / "src"`` from a ``{relative: content}`` dict."""

    def _make(files):
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


class RecordingLogger:
    """Collects (level, message) pairs instead of printing them."""

    def __init__(self):
        self.records = []

    def debug(self, message):
        self.records.append(("debug", message))

    def info(self, message):
        self.records.append(("info", message))

    def success(self, message):
        self.records.append(("success", message))

    def warning(self, message):
        self.records.append(("warning", message))

    def error(self, message):
        self.records.append(("error", message))

    def messages(self, level):
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def recorder():
    return RecordingLogger()
