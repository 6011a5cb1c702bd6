"""ebookshelf TUI widgets."""
