"""Terminal message helpers for the USTRING CLI.

Messages go to stderr so stdout only ever carries converted text.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" when stderr cannot encode it."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def error_glyph() -> str:
    """Return "❌", or "[X]" when stderr cannot encode it."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  2 code unit(s) above 0xFF were replaced with '?'.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
