# cli.py - interactive inventory browser
import math
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.inventory_client import InventoryClient, DEFAULT_BASE_URL

ITEMS_PER_PAGE = 10

console = Console()
c = InventoryClient(base_url=DEFAULT_BASE_URL)

# Browsing state: what the product table currently shows
status_message = "Ready"
view_state: Dict[str, Any] = {"search": "", "page": 1, "sort_by": None, "order": "asc"}
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def products_table(products: List[Dict[str, Any]], title: str = "📦 Products") -> Table:
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Category", width=15)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Description", width=30)

    for p in products:
        table.add_row(
            p.get("id", "N/A")[:8] + "...",
            p.get("name", "N/A"),
            p.get("category", "N/A"),
            str(p.get("quantity", 0)),
            f"${p.get('price', 0):.2f}",
            p.get("description", "")
        )
    return table


def show_page(envelope: Dict[str, Any]):
    products = envelope.get("data", [])
    total = envelope.get("total", 0)
    limit = envelope.get("limit", ITEMS_PER_PAGE) or ITEMS_PER_PAGE
    page = envelope.get("page", 1)
    pages = max(1, math.ceil(total / limit))

    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
    else:
        console.print(products_table(products))

    sort_desc = "none"
    if view_state["sort_by"]:
        sort_desc = f"{view_state['sort_by']} {view_state['order']}"
    console.print(
        f"[dim]Page {page} of {pages} · {total} matching · "
        f"search: '{view_state['search'] or '-'}' · sort: {sort_desc}[/dim]"
    )


def show_product(product: Dict[str, Any]):
    console.print(Panel.fit(
        f"[bold]{product.get('name')}[/bold]\n"
        f"ID: [dim]{product.get('id')}[/dim]\n"
        f"Category: {product.get('category')}\n"
        f"Quantity: {product.get('quantity')}\n"
        f"Price: [green]${product.get('price', 0):.2f}[/green]\n\n"
        f"{product.get('description')}",
        title="ℹ️ Product",
        border_style="cyan"
    ))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after reporting the error in the status panel.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def refresh_page(success_msg: Optional[str] = None):
    global product_cache
    envelope = try_api(
        c.list_products,
        search=view_state["search"] or None,
        page=view_state["page"],
        limit=ITEMS_PER_PAGE,
        sort_by=view_state["sort_by"],
        order=view_state["order"] if view_state["sort_by"] else None,
        success_msg=success_msg,
    )
    if envelope is not None:
        product_cache = envelope.get("data", [])
        show_page(envelope)
    return envelope


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def get_product_completer():
    ids = [p.get("id", "") for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: Optional[float] = None) -> float:
    while True:
        raw = Prompt.ask(message) if default is None else Prompt.ask(message, default=str(default))
        try:
            value = float(raw)
        except (TypeError, ValueError):
            console.print("[red]Please enter a valid number.[/red]")
            continue
        if value <= 0:
            console.print("[red]Value must be greater than zero.[/red]")
            continue
        return value


def ask_text(message: str, default: str = "") -> str:
    while True:
        value = prompt_with_autocomplete(message, default=default).strip()
        if value:
            return value
        console.print("[red]This field is required.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": ask_text("Name", default=current.get("name", "")),
        "quantity": ask_float("📦 Quantity", default=current.get("quantity")),
        "price": ask_float("💰 Price", default=current.get("price")),
        "description": ask_text("Description", default=current.get("description", "")),
        "category": ask_text("🏷️ Category", default=current.get("category", "")),
    }


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "📦 Inventory",
        "[bold blue]Inventory Management CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_page()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "6", "ℹ️ View product"),
            ("2", "🔍 Search by name", "7", "➕ Create product"),
            ("3", "↕️ Sort", "8", "✏️ Edit product"),
            ("4", "➡️ Next page", "9", "🗑️ Delete product"),
            ("5", "⬅️ Previous page", "q", "👋 Quit"),
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 10)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            refresh_page(success_msg="Products loaded successfully")

        elif choice == "2":
            view_state["search"] = prompt_with_autocomplete("Enter search term (blank to clear)").strip()
            view_state["page"] = 1
            refresh_page(success_msg=f"Search for '{view_state['search']}' completed")

        elif choice == "3":
            field = Prompt.ask("Sort by", choices=["none", "price", "quantity"], default="none")
            if field == "none":
                view_state["sort_by"] = None
            else:
                view_state["sort_by"] = field
                view_state["order"] = Prompt.ask("Order", choices=["asc", "desc"], default="asc")
            refresh_page()

        elif choice == "4":
            view_state["page"] += 1
            envelope = refresh_page()
            if envelope is not None and not envelope.get("data") and view_state["page"] > 1:
                view_state["page"] -= 1
                status_message = "Already on the last page"

        elif choice == "5":
            if view_state["page"] > 1:
                view_state["page"] -= 1
            refresh_page()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_product(resp)

        elif choice == "7":
            fields = ask_product_fields()
            resp = try_api(c.create_product, **fields, success_msg=f"Product '{fields['name']}' created successfully")
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_page()

        elif choice == "8":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            current = try_api(c.get_product, pid)
            if current:
                console.print("[dim]Press enter to keep the current value.[/dim]")
                fields = ask_product_fields(current)
                changes = {k: v for k, v in fields.items() if v != current.get(k)}
                if not changes:
                    status_message = "Nothing to update"
                else:
                    resp = try_api(c.update_product, pid, **changes, success_msg=f"Product {pid} updated")
                    if resp:
                        show_product(resp)
                        refresh_page()

        elif choice == "9":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            if Confirm.ask(f"[red]Delete product {pid}? This cannot be undone.[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    refresh_page()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
