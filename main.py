import logging
from enum import Enum
from typing import Callable, Dict, Optional, TextIO

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from book_inventory.book import Category
from book_inventory.library import Library, LibraryError
from config import settings
from utils.ui_helpers import (
    get_output_mode,
    print_book,
    print_book_list,
    print_line,
    print_message,
    set_output_mode,
)
from utils.validators import CategoryValidator, NumberValidator

APP_NAME = settings.app_name

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandLoop:
    """Menü tabanlı komut döngüsü: her turda bir seçim okur ve depoya iletir."""

    MENU_ITEMS = [
        ("1", "Add Book", "➕"),
        ("2", "View All Books", "📚"),
        ("3", "Search Books by Category", "🏷️"),
        ("4", "Search Book by ID", "🔎"),
        ("5", "Delete Book by ID", "🗑️"),
        ("6", "Update Book by ID", "✏️"),
        ("7", "Exit", "🚪"),
    ]

    def __init__(self, library: Library, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> None:
        self.library = library
        self.console = console or Console()
        # stream verilmezse girdi terminalden (stdin) okunur
        self.stream = stream
        self.state = LoopState.RUNNING
        self._commands: Dict[int, Callable[[], None]] = {
            1: self.add_book,
            2: self.view_books,
            3: self.search_by_category,
            4: self.search_by_id,
            5: self.delete_book,
            6: self.update_book,
            7: self.exit,
        }

    # ------------------------- Döngü ------------------------- #
    def run(self) -> None:
        print_line(self.console, f"=== {APP_NAME} ===")
        while self.state is LoopState.RUNNING:
            try:
                self.step()
            except (EOFError, KeyboardInterrupt):
                # Girdi kapandı; Çıkış komutu gibi sonlandır
                logger.debug("Input closed, terminating loop")
                self.exit()

    def step(self) -> None:
        """Menüyü göster, bir seçim oku ve ilgili komutu çalıştır."""
        self.render_menu()
        raw = self._ask("Enter choice: ")
        choice = NumberValidator.parse_int(raw)
        if choice is None:
            print_message(self.console, "Error: Enter a number!", "error")
            return
        self.dispatch(choice)

    def dispatch(self, choice: int) -> None:
        command = self._commands.get(choice)
        if command is None:
            print_message(self.console, "Invalid choice!", "warning")
            return
        command()

    def render_menu(self) -> None:
        if get_output_mode() != "rich":
            print_line(self.console, "")
            for key, label, _icon in self.MENU_ITEMS:
                print_line(self.console, f"{key}. {label}")
            return

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in self.MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        self.console.print(Panel(
            table,
            title=APP_NAME,
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    # ------------------------- Komutlar ------------------------- #
    def add_book(self) -> None:
        """Yeni bir kitap ekler; depo doluysa alanları sormadan reddeder."""
        capacity = self.library.check_capacity()
        if not capacity.ok:
            self._report(capacity.error)
            return

        title = self._ask("Enter Book Title : ").strip()
        author = self._ask("Enter Author Name: ").strip()
        category = self.read_category("Enter Category: ")

        outcome = self.library.insert(title, author, category)
        if outcome.ok:
            print_message(self.console, "Book added successfully!", "success")
        else:
            self._report(outcome.error)

    def view_books(self) -> None:
        books = self.library.list_all()
        if not books:
            print_message(self.console, "No books available.", "warning")
            return
        print_book_list(self.console, books, "\n--- All Books ---", self.library.statistics())

    def search_by_category(self) -> None:
        category = self.read_category("Enter Category to search: ")
        books = self.library.filter_by_category(category)
        if not books:
            print_message(self.console, "None found.", "warning")
            return
        print_book_list(self.console, books, f"\nBooks in {category}:")

    def search_by_id(self) -> None:
        if self.library.is_empty:
            print_message(self.console, "No books available.", "warning")
            return
        book_id = self.read_int("Enter Book ID to search: ")
        outcome = self.library.find_by_id(book_id)
        if outcome.ok:
            print_book(self.console, outcome.value, "Found")
        else:
            self._report(outcome.error)

    def delete_book(self) -> None:
        if self.library.is_empty:
            print_message(self.console, "No books to delete.", "warning")
            return
        book_id = self.read_int("Enter Book ID to delete: ")
        outcome = self.library.delete_by_id(book_id)
        if outcome.ok:
            print_message(self.console, "Book deleted.", "success")
        else:
            self._report(outcome.error)

    def update_book(self) -> None:
        """Id'ye göre kitabı günceller; boş bırakılan alanlar korunur."""
        if self.library.is_empty:
            print_message(self.console, "No books to update.", "warning")
            return
        book_id = self.read_int("Enter Book ID to update: ")
        # Yeni değerleri sormadan önce kitabın var olduğunu doğrula
        found = self.library.find_by_id(book_id)
        if not found.ok:
            self._report(found.error)
            return

        title = self._ask("New Title (blank = keep): ")
        author = self._ask("New Author (blank = keep): ")
        category: Optional[Category] = None
        if self._ask("Change Category? (y/N): ").strip().lower() == "y":
            category = self.read_category("Enter new Category: ")

        outcome = self.library.update(book_id, title=title, author=author, category=category)
        if outcome.ok:
            print_book(self.console, outcome.value, "Updated")
        else:
            self._report(outcome.error)

    def exit(self) -> None:
        self.state = LoopState.TERMINATED
        print_message(self.console, "Exiting...")

    # ------------------------- Girdi ------------------------- #
    def read_int(self, prompt: str) -> int:
        """Geçerli bir tam sayı girilene kadar tekrar sor."""
        while True:
            value = NumberValidator.parse_int(self._ask(prompt))
            if value is not None:
                return value
            print_message(self.console, "Invalid number!", "error")

    def read_category(self, prompt: str) -> Category:
        """Geçerli bir kategori adı girilene kadar tekrar sor (büyük/küçük harf duyarsız)."""
        while True:
            print_line(self.console, f"Available: {CategoryValidator.available()}")
            category = CategoryValidator.parse_category(self._ask(prompt))
            if category is not None:
                return category
            print_message(self.console, "Invalid category, try again.", "error")

    def _ask(self, prompt: str) -> str:
        if self.stream is None:
            return self.console.input(prompt, markup=False, emoji=False)
        self.console.print(prompt, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)
        line = self.stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _report(self, error: Optional[LibraryError]) -> None:
        print_message(self.console, str(error), "error")


def configure_logging(level: Optional[str] = None) -> None:
    level = level or ("DEBUG" if settings.debug else settings.log_level)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s - %(name)s - %(message)s",
    )


def run_menu(capacity: Optional[int] = None, stream: Optional[TextIO] = None) -> Library:
    """Yeni, boş bir depo oluşturur ve etkileşimli menüyü çalıştırır."""
    library = Library(capacity=capacity)
    CommandLoop(library, stream=stream).run()
    return library


# --- Typer CLI Uygulaması ---
app = typer.Typer(help="Book inventory CLI", invoke_without_command=True, add_completion=False)

@app.callback()
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Çıktı formatı: plain | json | rich (varsayılan: plain)",
    ),
    capacity: Optional[int] = typer.Option(
        None,
        "--capacity",
        "-c",
        min=1,
        help="Depoda tutulabilecek en fazla kitap sayısı",
    ),
):
    """Alt komut verilmezse etkileşimli menüyü başlatır."""
    configure_logging()
    if output and not set_output_mode(output):
        raise typer.BadParameter(f"Unsupported output mode: {output}", param_hint="--output")
    if ctx.invoked_subcommand is None:
        run_menu(capacity=capacity)

@app.command("categories")
def cli_categories():
    """Geçerli kategori adlarını listele."""
    for name in Category.names():
        print(name)


if __name__ == "__main__":
    app()
