"""HTML rendering of the accounts view for Streamlit."""

from html import escape

from src.application.use_cases.account_table import (
    AccountsView,
    BadgeVariant,
    Cell,
    CellKind,
    RenderMode,
)


ERROR_ICON = ":material/error:"

TABLE_STYLE = """
<style>
.accounts-table { width: 100%; border-collapse: collapse; }
.accounts-table th { text-align: left; font-weight: 500; opacity: 0.7;
  padding: 0.5rem 0.75rem; border-bottom: 1px solid rgba(128,128,128,0.3); }
.accounts-table td { padding: 0.6rem 0.75rem;
  border-bottom: 1px solid rgba(128,128,128,0.15); }
.accounts-table tbody tr:hover { background: rgba(128,128,128,0.08); }
.accounts-empty { text-align: center; opacity: 0.6; padding: 2.5rem 0; }
.accounts-skeleton { height: 3rem; width: 100%; border-radius: 0.375rem;
  margin-bottom: 0.5rem; background: rgba(128,128,128,0.18);
  animation: accounts-pulse 1.5s ease-in-out infinite; }
@keyframes accounts-pulse { 50% { opacity: 0.5; } }
.badge { display: inline-block; border-radius: 9999px;
  padding: 0.1rem 0.6rem; font-size: 0.75rem; font-weight: 600; }
.badge-default { background: #1f2937; color: #f9fafb; }
.badge-secondary { background: rgba(128,128,128,0.2); }
.badge-outline { border: 1px solid rgba(128,128,128,0.5); }
.font-medium { font-weight: 500; }
.font-semibold { font-weight: 600; }
.amount-negative { color: #ef4444; }
.amount-positive { color: #16a34a; }
.amount-invalid { color: #9ca3af; font-style: italic; }
.text-muted { opacity: 0.6; }
.text-sm { font-size: 0.875rem; }
</style>
"""


def _class_attr(classes: list[str]) -> str:
    return escape(" ".join(classes))


def cell_html(cell: Cell) -> str:
    """Render a single cell with its presentation primitive."""
    text = escape(cell.text)
    if cell.kind is CellKind.BADGE:
        variant = cell.variant or BadgeVariant.DEFAULT
        classes = ["badge", f"badge-{variant.value}", *cell.classes]
        return f'<span class="{_class_attr(classes)}">{text}</span>'
    return f'<span class="{_class_attr(list(cell.classes))}">{text}</span>'


def skeleton_html(count: int) -> str:
    """Render ``count`` full-width placeholder blocks."""
    blocks = '<div class="accounts-skeleton"></div>' * count
    return f'<div class="accounts-skeletons">{blocks}</div>'


def table_html(view: AccountsView) -> str:
    """Render the table shell, rows, or the empty-state row."""
    header = "".join(f"<th>{escape(label)}</th>" for label in view.headers)
    if view.rows:
        body = "".join(
            f'<tr data-key="{escape(row.key)}">'
            + "".join(f"<td>{cell_html(cell)}</td>" for cell in row.cells)
            + "</tr>"
            for row in view.rows
        )
    else:
        body = (
            f'<tr><td class="accounts-empty" colspan="{view.column_count}">'
            f"{escape(view.empty_message or '')}</td></tr>"
        )
    return (
        '<table class="accounts-table">'
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


def draw_accounts_view(placeholder, view: AccountsView) -> None:
    """Replace the placeholder content with the given view.

    Args:
        placeholder: Streamlit element (usually ``st.empty()``) redrawn on
            every state transition.
        view: Presentation model to draw.
    """
    root = placeholder.container()
    if view.mode is RenderMode.ERROR:
        root.error(
            f"**{view.error_title}**\n\n{view.error_message}",
            icon=ERROR_ICON,
        )
        return

    card = root.container(border=True)
    card.subheader(view.title)
    card.caption(view.description)
    if view.mode is RenderMode.SKELETON:
        card.markdown(
            skeleton_html(view.skeleton_rows),
            unsafe_allow_html=True,
        )
    else:
        card.markdown(table_html(view), unsafe_allow_html=True)


__all__ = [
    "ERROR_ICON",
    "TABLE_STYLE",
    "cell_html",
    "draw_accounts_view",
    "skeleton_html",
    "table_html",
]
