from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import configure, load_config
from .engine import load_template
from .errors import HBAssetsError
from .jsonic import dumps as jdumps
from .preprocess import probe_preprocessors
from .report import build_report
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hbassets",
        description="Handlebars template precompiler (JavaScript wrappers for asset pipelines)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for compile/report/classify
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("file", help="template file (.hbs, .handlebars, .hamlbars, .slimbars)")
        sp.add_argument(
            "--root",
            default=".",
            help="project root; the logical path is computed relative to it (default: cwd)",
        )
        sp.add_argument(
            "--config",
            metavar="FILE",
            help="YAML config (default: $HBASSETS_CONFIG or <root>/hbassets.yaml)",
        )

    sp_compile = sub.add_parser("compile", help="Generated JavaScript to stdout")
    add_common(sp_compile)

    sp_report = sub.add_parser("report", help="JSON report: classification, wrapper and output")
    add_common(sp_report)

    sp_classify = sub.add_parser("classify", help="JSON: how the file is classified (no compilation)")
    add_common(sp_classify)

    sub.add_parser("preprocessors", help="JSON: availability of optional preprocessors")

    return p


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, ns.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if ns.cmd == "preprocessors":
            sys.stdout.write(jdumps({"preprocessors": probe_preprocessors()}))
            return 0

        root = Path(ns.root)
        cfg_file = Path(ns.config) if ns.config else None
        config = configure(load_config(cfg_file, root=root))
        template = load_template(Path(ns.file), root, config=config)

        if ns.cmd == "classify":
            sys.stdout.write(jdumps(template.template_path.to_dict()))
            return 0

        output = template.render()

        if ns.cmd == "compile":
            sys.stdout.write(output)
            return 0

        if ns.cmd == "report":
            sys.stdout.write(jdumps(build_report(template, output).model_dump(mode="json")))
            return 0

    except HBAssetsError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except OSError as e:
        sys.stderr.write(f"{e}\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
