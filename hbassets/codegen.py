"""
JavaScript code generation for compiled templates.

Every wrapper shape is a pure function of its inputs. Multi-line blocks are
written with a base indentation (like heredocs) and normalized by unindent().
"""

from __future__ import annotations

import json
import re

__all__ = [
    "unindent",
    "framework_template",
    "partial",
    "amd_partial",
    "template",
    "amd_template",
]

_LEADING_WS = re.compile(r"[^\S\n]*")


def unindent(text: str) -> str:
    """
    Strip leading whitespace from each line that is the same as the
    whitespace on the first line of the string.
    Leaves additional indentation on later lines intact.
    """
    indent = _LEADING_WS.match(text).group(0)
    if not indent:
        return text
    return re.sub("^" + re.escape(indent), "", text, flags=re.MULTILINE)


def _nest(text: str, prefix: str) -> str:
    """Prefix every line except the first, so a block can sit at an inner indent."""
    return ("\n" + prefix).join(text.rstrip("\n").split("\n"))


# No AMD support for Ember yet.
def framework_template(name: str, source: str) -> str:
    """Ember compiles the markup at runtime: register the raw source, JSON-escaped."""
    return f"window.Ember.TEMPLATES[{name}] = Ember.Handlebars.compile({json.dumps(source)});"


_PARTIAL = """\
    (function() {{
      Handlebars.registerPartial({name}, Handlebars.template({compiled}));
    }}).call(this);
"""

_AMD_PARTIAL = """\
    define(['{amd_path}'], function(Handlebars) {{
      {body}
    }});
"""

_TEMPLATE = """\
    (function() {{
      this.{ns} || (this.{ns} = {{}});
      this.{ns}[{name}] = Handlebars.template({compiled});
      return this.{ns}[{name}];
    }}).call(this);
"""

_AMD_TEMPLATE = """\
    define(['{amd_path}'], function(Handlebars) {{
      return Handlebars.template({compiled});
    }});
"""


def partial(name: str, compiled: str) -> str:
    return unindent(_PARTIAL.format(name=name, compiled=compiled))


def amd_partial(body: str, amd_path: str) -> str:
    """Wrap an already generated partial registration into an AMD module."""
    return unindent(_AMD_PARTIAL.format(amd_path=amd_path, body=_nest(body, "      ")))


def template(name: str, compiled: str, namespace: str) -> str:
    return unindent(_TEMPLATE.format(ns=namespace, name=name, compiled=compiled))


def amd_template(compiled: str, amd_path: str) -> str:
    return unindent(_AMD_TEMPLATE.format(amd_path=amd_path, compiled=compiled))
