"""Book add screen with a small form for a new e-book.

Validation is left to the catalogue service; its error message is shown
inline and the form stays open so the user can correct it.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Label, Static

from ..errors import CatalogError

# (field_name, label, placeholder)
_FIELDS = [
    ("title", "Title", "required"),
    ("author", "Author", "required"),
    ("category", "Category", "e.g. Novel"),
    ("format", "Format", "e.g. EPUB"),
]


class BookAddScreen(Screen):
    """Form screen for adding a book to the catalogue."""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        """Build the form with inputs and action buttons."""
        with VerticalScroll(id="add-container"):
            yield Static("Add Book", id="add-heading")
            yield Static("", id="add-error")

            for field_name, label, placeholder in _FIELDS:
                with Horizontal(classes="add-field-row"):
                    yield Label(f"{label:<16}", classes="add-label-inline")
                    yield Input(
                        placeholder=placeholder,
                        id=f"add-{field_name}",
                        classes="add-input",
                    )

            with Horizontal(id="add-buttons"):
                yield Button("Save", id="add-save", variant="primary")
                yield Button("Cancel", id="add-cancel")

        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#add-title", Input).focus()

    def _collect_values(self) -> dict[str, str]:
        """Return the current input values keyed by field name."""
        return {
            field_name: self.query_one(f"#add-{field_name}", Input).value
            for field_name, _label, _placeholder in _FIELDS
        }

    def _show_error(self, message: str) -> None:
        self.query_one("#add-error").update(f"[#c45a3a]{message}[/#c45a3a]")

    def action_save(self) -> None:
        """Save the book (bound to ``Ctrl+S``)."""
        self._do_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Save and Cancel button presses."""
        if event.button.id == "add-save":
            self._do_save()
        elif event.button.id == "add-cancel":
            self.action_cancel()

    def _do_save(self) -> None:
        """Add the book through the catalogue and return to the main screen."""
        try:
            book = self.app.catalog.add_book(**self._collect_values())
        except CatalogError as e:
            self._show_error(str(e))
            return

        self.app.activity.record("create", "tui", book)
        self.app.notify(f"Added #{book.book_id}: {book.title}")
        self.app.pop_screen()

    def action_cancel(self) -> None:
        """Discard the form and return to the main screen."""
        self.app.pop_screen()
