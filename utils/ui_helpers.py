import os
import json
from typing import Any, Dict, List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIBRARY_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_line(console: Console, text: str) -> None:
    """Kullanıcı metnini rich işaretlemesi yorumlanmadan yazdır."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

def print_book_list(console: Console, books: List[Any], header: str, stats: Optional[Dict[str, Any]] = None) -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: başlık satırı ve ardından '[id] Title by Author (CATEGORY)' satırları
    - json: id, title, author, category içeren JSON dizisi
    - rich: Rich tablosu
    Boş liste durumunu çağıran taraf ele alır.
    """
    mode = get_output_mode()

    if mode == "json":
        print_line(console, json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {escape(header.strip())}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Category", style="green")
        for b in books:
            table.add_row(str(b.id), escape(b.title), escape(b.author), b.category.name)
        console.print(table)
        if stats:
            console.print(f"[dim]📊 {stats['total_books']}/{stats['capacity']} slots used[/]")
    else:
        print_line(console, header)
        for b in books:
            print_line(console, str(b))

def print_book(console: Console, book: Any, label: str) -> None:
    """Tek bir kitabı '<label>: [id] ...' biçiminde ya da JSON/panel olarak yazdır."""
    mode = get_output_mode()

    if mode == "json":
        print_line(console, json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]ID:[/] {book.id}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]Category:[/] {book.category.name}"
        )
        console.print(Panel.fit(content, title=f"🔍 {escape(label)}", border_style="green"))
    else:
        print_line(console, f"{label}: {book}")

def print_message(console: Console, message: str, level: str = "info") -> None:
    """Sonuç ve hata satırlarını yazdır; renk yalnızca rich modunda kullanılır."""
    if get_output_mode() == "rich":
        style = {"error": "bold red", "warning": "yellow", "success": "green"}.get(level, "white")
        console.print(f"[{style}]{escape(message)}[/]")
    else:
        print_line(console, message)
