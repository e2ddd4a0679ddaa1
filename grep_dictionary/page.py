"""
HTML for the search page: form, error line, and the list of matches.
"""
from __future__ import annotations

from html import escape

from .grep import MatchRecord, Segments


def _render_match(record: MatchRecord, highlight: bool) -> str:
    if not isinstance(record, Segments):
        return escape(record)
    if not highlight:
        return escape(record.before + record.match + record.after)
    return f"{escape(record.before)}<mark>{escape(record.match)}</mark>{escape(record.after)}"


def _render_results(matches: list[MatchRecord] | None, highlight: bool) -> str:
    if matches is None:
        return ""
    if not matches:
        return '<p class="count">No matches.</p>'
    items = "\n".join(f"<li>{_render_match(m, highlight)}</li>" for m in matches)
    noun = "match" if len(matches) == 1 else "matches"
    return f'<p class="count">{len(matches)} {noun}</p>\n<ol class="matches">\n{items}\n</ol>'


def render_page(
    pattern: str,
    matches: list[MatchRecord] | None,
    *,
    error: str = "",
    highlight: bool = False,
) -> str:
    """matches is None when no search ran (empty pattern)."""
    checked = " checked" if highlight else ""
    error_html = f'<p class="error">{escape(error)}</p>' if error else ""
    return f"""<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>Grep Dictionary</title>
<style>mark {{ background: #ffe066; }} .error {{ color: #b00020; }}</style>
</head>
<body>
<h1>Grep Dictionary</h1>
<form method="get" action="/">
<input type="text" name="pattern" value="{escape(pattern, quote=True)}" placeholder="regular expression" autofocus>
<label><input type="checkbox" name="highlight" value="on"{checked}> Highlight</label>
<button type="submit">Search</button>
</form>
{error_html}
{_render_results(matches, highlight)}
</body></html>"""
