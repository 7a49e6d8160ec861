"""Jinja2 template rendering for the generated application.

The ``.j2`` sources under ``express_skeleton/scaffolder/templates/`` turn into
JavaScript files here.  Every interpolated value is passed through
:func:`inspect_literal`, so data lands in the generated file as a quoted,
escaped literal; values that are code (identifiers, middleware expressions)
are marked with the ``safe`` filter and emitted verbatim.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)
from markupsafe import Markup

from ..config import DEFAULT_TEMPLATE_DIR
from ..errors import TemplateError
from .binding import TemplateBinding

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# Literal rendering
# ---------------------------------------------------------------------------

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z_0-9]*")

_ESCAPES = {
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
}


def _quote_string(value: str) -> str:
    quote = "'"
    if "'" in value:
        if '"' not in value:
            quote = '"'
        elif "`" not in value and "${" not in value:
            quote = "`"

    out: list[str] = []
    for char in value:
        if char == quote:
            out.append("\\" + char)
        elif char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or 0x7F <= ord(char) <= 0x9F:
            out.append(f"\\x{ord(char):02X}")
        elif char in "\u2028\u2029":
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return quote + "".join(out) + quote


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    # Positional between 1e-7 and 1e21, exponent form outside.
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def inspect_literal(value: Any) -> str:
    """Render *value* as JavaScript source text.

    Strings become single-quoted literals (double or backtick quotes are
    chosen when that avoids escaping), with backslashes, quotes and control
    characters escaped.  Booleans, ``None``, numbers, sequences and mappings
    map to their JavaScript literal forms.

    Examples::

        inspect_literal("/user")          -> '/user'
        inspect_literal("it's")           -> "it's"
        inspect_literal({"a": [1, True]}) -> { a: [ 1, true ] }
    """
    if isinstance(value, Markup):
        return str(value)
    if isinstance(value, str):
        return _quote_string(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = []
        for key, item in value.items():
            key_text = str(key)
            if not _IDENTIFIER.fullmatch(key_text):
                key_text = _quote_string(key_text)
            items.append(f"{key_text}: {inspect_literal(item)}")
        return "{ " + ", ".join(items) + " }"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        return "[ " + ", ".join(inspect_literal(item) for item in value) + " ]"
    return _quote_string(str(value))


# ---------------------------------------------------------------------------
# AppTemplate
# ---------------------------------------------------------------------------


class AppTemplate:
    """A loaded template paired with the binding it renders against.

    ``binding`` may be reassigned any number of times; :meth:`render` always
    uses the binding current at call time.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        name: str,
        binding: TemplateBinding | None = None,
    ) -> None:
        self.renderer = renderer
        self.name = name
        self.binding = binding or TemplateBinding()

    def render(self) -> str:
        return self.renderer.render(self.name, self.binding.as_context())


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Jinja2 front end for the skeleton's ``.j2`` sources.

    Every ``{{ ... }}`` value is finalized through :func:`inspect_literal`, so
    plain data lands in the output as a JavaScript literal and only ``safe``
    values pass through verbatim. ``StrictUndefined`` turns a missing name
    into :class:`TemplateError`.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            finalize=inspect_literal,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Loading -----------------------------------------------------------

    def load_template(
        self, name: str, binding: TemplateBinding | None = None
    ) -> AppTemplate:
        """Load ``<name>.j2`` and pair it with *binding* (empty by default).

        The template is parsed immediately so a missing or malformed file
        fails here rather than at render time.
        """
        template_name = f"{name}{TEMPLATE_SUFFIX}"
        self._get_template(template_name)
        return AppTemplate(self, template_name, binding)

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (full ``.j2`` name) against *context*.

        Raises:
            TemplateError: The file is missing or malformed, or the template
                reads a name *context* does not bind.
        """
        template = self._get_template(template_path)
        try:
            return template.render(**context)
        except UndefinedError as exc:
            raise TemplateError(template_path, str(exc)) from exc

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render Jinja2 source held in memory; errors become TemplateError."""
        try:
            return self.env.from_string(template_string).render(**context)
        except TemplateSyntaxError as exc:
            raise TemplateError("<string>", f"line {exc.lineno}: {exc.message}") from exc
        except UndefinedError as exc:
            raise TemplateError("<string>", str(exc)) from exc

    # -- Internal ----------------------------------------------------------

    def _get_template(self, template_path: str):
        try:
            return self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise TemplateError(
                template_path, f"not found in {self.template_dir}"
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateError(template_path, f"line {exc.lineno}: {exc.message}") from exc
