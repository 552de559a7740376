"""Plain-text formatting for the command line."""

from datetime import date

from .models import DailySelection, NextLiturgicalDay, Quote, RotationState

LINE_WIDTH = 72


def wrap_text(text: str, max_len: int = LINE_WIDTH) -> list[str]:
    """Wrap text into lines at word boundaries."""
    if len(text) <= max_len:
        return [text]
    lines = []
    while text:
        if len(text) <= max_len:
            lines.append(text)
            break
        split_at = text.rfind(" ", 0, max_len)
        if split_at == -1:
            split_at = max_len
        lines.append(text[:split_at])
        text = text[split_at:].lstrip()
    return lines


def format_quote(quote: Quote) -> str:
    """Quote text followed by an attribution line."""
    body = "\n".join(wrap_text(f"“{quote.text}”"))
    return f"{body}\n    — {quote.author}"


def format_selection(selection: DailySelection, for_date: date) -> str:
    """Today's quote with a dated header."""
    header = f"Quote for {for_date.strftime('%A, %d %B %Y')}"
    if selection.celebration_name:
        header += f" | {selection.celebration_name}"

    if selection.quote is None:
        return f"{header}\n\n{format_error_message()}"
    return f"{header}\n\n{format_quote(selection.quote)}"


def format_next_day(next_day: NextLiturgicalDay | None) -> str:
    if next_day is None:
        return "No upcoming liturgical days in the calendar."
    return f"Next: {next_day.name} ({next_day.display_date})"


def format_state(state: RotationState | None) -> str:
    """Summary of the shuffle rotation."""
    if state is None:
        return "No shuffle state yet."
    return (
        f"Cycle {state.cycle_number}, position {state.position + 1}/{len(state.order)}, "
        f"last advanced {state.last_advanced_date or 'never'}"
    )


def format_error_message() -> str:
    return "Unable to load a quote today."
