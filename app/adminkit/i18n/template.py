"""Positional "{}" template filling.

Templates use an unnamed two-character placeholder, filled left to right:

    >>> format_template("Hello, {}! Today is {}.", "Alice", "Monday")
    'Hello, Alice! Today is Monday.'

A backslash escapes a placeholder (``\\{}`` renders ``{}`` and consumes no
argument); a doubled backslash renders one backslash followed by the
argument. Placeholders left over once the arguments run out stay literal.
"""

from typing import Any

PLACEHOLDER = "{}"
ESCAPE = "\\"


def has_placeholder(template: str) -> bool:
    return PLACEHOLDER in template


def format_template(template: str, *args: Any) -> str:
    """Fill ``{}`` placeholders in order with ``str(arg)``.

    Args:
        template: Template string.
        *args: Positional values; extra values are ignored.

    Returns:
        The filled string. With no args the template is returned as-is.
    """
    if not template or not args:
        return template

    parts = []
    position = 0
    arg_index = 0
    while arg_index < len(args):
        marker = template.find(PLACEHOLDER, position)
        if marker == -1:
            break

        if marker > 0 and template[marker - 1] == ESCAPE:
            if marker > 1 and template[marker - 2] == ESCAPE:
                # "\\{}": keep one backslash, then substitute
                parts.append(template[position : marker - 1])
                parts.append(str(args[arg_index]))
                arg_index += 1
                position = marker + 2
            else:
                # "\{}": literal placeholder
                parts.append(template[position : marker - 1])
                parts.append(PLACEHOLDER)
                position = marker + 2
            continue

        parts.append(template[position:marker])
        parts.append(str(args[arg_index]))
        arg_index += 1
        position = marker + 2

    parts.append(template[position:])
    return "".join(parts)
