"""Terminal message helpers for the USERFIELDS CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr by default so stdout can remain machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def success_glyph() -> str:
    """Success marker: "✅" when the stream supports it, otherwise "[OK]"."""
    emoji, fallback = ("✅", "[OK]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def error_glyph() -> str:
    """Error marker: "❌" when the stream supports it, otherwise "[X]"."""
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  User record is valid.``
    """
    g = success_glyph()
    click.secho(f"{g}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Example:
        ``❌  Invalid user field 'username': ...``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)
