"""Pytest configuration and fixtures."""

import shutil
import tempfile
from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path

import pytest

from verificile.config import Settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\ntrailer\n<<>>\n%%EOF\n"


class ScriptedPrompter:
    """Prompt port fake that replays canned operator answers.

    An empty answer returns the prompt's default, like pressing Enter.
    """

    def __init__(self, answers: list[str] | None = None) -> None:
        self.answers = list(answers or [])
        self.prompts: list[str] = []
        self.messages: list[tuple[str, str]] = []

    def ask(self, prompt: str, default: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        answer = self.answers.pop(0)
        return answer or default

    def show(self, message: str, *, style: str = "info") -> None:
        self.messages.append((style, message))

    @property
    def output(self) -> str:
        return "\n".join(message for _, message in self.messages)


class NameDetector:
    """Detector port fake keyed on file name."""

    def __init__(self, types: dict[str, str], default: str = "") -> None:
        self.types = dict(types)
        self.default = default
        self.calls: list[Path] = []

    def detect(self, path: Path) -> str:
        self.calls.append(path)
        return self.types.get(path.name, self.default)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir).resolve()
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """Operator fake with no scripted answers (tests append their own)."""
    return ScriptedPrompter()


@pytest.fixture
def make_detector() -> Callable[..., NameDetector]:
    """Factory for name-keyed detector fakes."""
    return NameDetector


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Deterministic clock for report and log timestamps."""
    return lambda: datetime(2025, 5, 15, 21, 31, 37)


@pytest.fixture
def mixed_dir(temp_dir: Path) -> Path:
    """Directory with a correct PDF and a PNG disguised as a JPEG."""
    scan_dir = temp_dir / "scan"
    scan_dir.mkdir()
    (scan_dir / "doc.pdf").write_bytes(PDF_BYTES)
    (scan_dir / "image.jpg").write_bytes(PNG_BYTES)
    return scan_dir


@pytest.fixture
def mixed_detector(make_detector) -> NameDetector:
    """Detector matching the ``mixed_dir`` fixture contents."""
    return make_detector({"doc.pdf": "application/pdf", "image.jpg": "image/png"})


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated Verificile settings scoped to tests."""

    import verificile.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    report_dir = temp_dir / "reports"
    config_dir = temp_dir / "appconfig"
    report_dir.mkdir(parents=True, exist_ok=True)
    config_dir.mkdir(parents=True, exist_ok=True)

    settings = config_module.Settings(
        report_dir=report_dir,
        config_dir=config_dir,
    )

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
