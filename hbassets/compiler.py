"""
Handlebars precompiler bindings.

The core only depends on the TemplateCompiler protocol: any object with
compile(source, options) -> str will do. NodeCompiler is the default
implementation and runs handlebars' own precompiler under Node.js.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Mapping, Optional, Protocol, Sequence

from .errors import CompilationError

__all__ = ["TemplateCompiler", "NodeCompiler"]

logger = logging.getLogger(__name__)


class TemplateCompiler(Protocol):
    def compile(self, source: str, options: Mapping[str, Any]) -> str:
        """Precompile Handlebars markup into a JS template spec fragment."""
        ...


# Reads markup from stdin, options as JSON from argv, writes the template spec to stdout.
_PRECOMPILE_JS = """
const Handlebars = require('handlebars');
let src = '';
process.stdin.setEncoding('utf8');
process.stdin.on('data', (chunk) => { src += chunk; });
process.stdin.on('end', () => {
  try {
    const options = JSON.parse(process.argv[process.argv.length - 1] || '{}');
    process.stdout.write(String(Handlebars.precompile(src, options)));
  } catch (e) {
    process.stderr.write(String((e && e.message) || e));
    process.exit(1);
  }
});
"""


class NodeCompiler:
    """Precompile templates with the `handlebars` npm package via Node.js."""

    def __init__(self, command: Sequence[str] = ("node",), *, cwd: Optional[str] = None):
        self.command = list(command)
        self.cwd = cwd

    def compile(self, source: str, options: Mapping[str, Any]) -> str:
        argv = [*self.command, "-e", _PRECOMPILE_JS, json.dumps(dict(options))]
        logger.debug(f"Running precompiler: {self.command}")
        try:
            proc = subprocess.run(
                argv,
                input=source,
                capture_output=True,
                text=True,
                encoding="utf-8",
                cwd=self.cwd,
            )
        except FileNotFoundError as e:
            raise CompilationError(f"Handlebars precompiler not found: {self.command[0]}") from e

        if proc.returncode != 0:
            raise CompilationError(proc.stderr.strip() or f"precompiler exited with code {proc.returncode}")
        return proc.stdout
