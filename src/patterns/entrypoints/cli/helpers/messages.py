"""Terminal message helpers for the PATTERNS CLI.

Messages write to stderr so stdout only carries demo output.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def success_glyph() -> str:
    """Return "✅", or "[OK]" where stderr cannot encode it."""
    emoji, fallback = ("✅", "[OK]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def error_glyph() -> str:
    """Return "❌", or "[X]" where stderr cannot encode it."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Replayed 9 patterns.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Unknown formatter 'title'.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
