import io
import pytest
from rich.console import Console

from book_inventory.library import Library
from main import CommandLoop
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Her test düz metin çıktısıyla başlar; test sonunda ortam geri yüklenir
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

@pytest.fixture
def lib():
    # Her test için boş, 5 kapasiteli yeni bir depo
    return Library(capacity=5)

@pytest.fixture
def make_console():
    def _make():
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, force_terminal=False, color_system=None)
        return console, buffer
    return _make

@pytest.fixture
def run_loop(lib, make_console):
    """Betiklenmiş girdiyle komut döngüsünü çalıştırır ve çıktıyı döndürür."""
    def _run(script: str, library: Library = None) -> str:
        console, buffer = make_console()
        loop = CommandLoop(library if library is not None else lib, console=console, stream=io.StringIO(script))
        loop.run()
        return buffer.getvalue()
    return _run
