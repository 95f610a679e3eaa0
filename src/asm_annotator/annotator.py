from __future__ import annotations
import argparse, logging, sys, time
from datetime import datetime
from typing import List, Optional, Tuple

from rich.logging import RichHandler

from .analyzer import analyze_line, classify_line
from .arch import UNKNOWN, detect_architecture
from .diagnostics import Diagnostic, error, warning
from .paths import validate_source_path, output_path
from .writers import SOURCE_ERRORS, VERSION, render_header, render_line, write_annotated

log = logging.getLogger(__name__)

PROMPT = "Enter assembly file/directory (e.g. file.asm or /path/to/file.asm): "

def source_lines(text: str) -> List[str]:
    """Parte el texto en líneas como getline: sin la línea vacía tras el último '\\n'."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines

def annotate_text(text: str, *, now: Optional[datetime] = None) -> Tuple[str, str]:
    """Detecta la arquitectura y anota cada línea.
    Devuelve (texto_anotado, arquitectura)."""
    lines = source_lines(text)
    arch = detect_architecture(lines)
    out = render_header(arch, now=now or datetime.now())
    for lineno, line in enumerate(lines, start=1):
        comment = analyze_line(line)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("%d: %r", lineno, classify_line(line))
        out.append(render_line(line, comment))
    return "".join(out), arch

def _report(d: Diagnostic) -> None:
    print(d, file=sys.stderr)

def setup_logging(verbose: int = 0) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)]
    )

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Assembly source annotator")
    ap.add_argument("source", nargs="?", help="archivo .asm/.s de entrada (si falta, se pregunta)")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto <nombre>_analyzed.<ext>)")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="muestra la clasificación de cada línea")
    ap.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    source = args.source
    if source is None:
        try:
            source = input(PROMPT)
        except EOFError:
            source = ""

    try:
        validate_source_path(source)
    except ValueError as ex:
        _report(error(str(ex), file=source or None))
        return 2

    begin = time.perf_counter()
    dest = args.output or output_path(source)
    try:
        with open(source, "r", encoding="utf-8", errors=SOURCE_ERRORS) as f:
            text = f.read()
    except OSError as ex:
        _report(error("File not found", file=source, hint=str(ex)))
        return 2

    annotated, arch = annotate_text(text)
    log.debug("arquitectura de %s: %s", source, arch)
    if arch == UNKNOWN:
        _report(warning("no se detectó la arquitectura", file=source,
                        hint="añada p.ej. 'BITS 64' o '.code32'"))

    try:
        write_annotated([annotated], dest)
    except OSError as ex:
        _report(error(f"Cannot open {dest}, exiting.", file=dest, hint=str(ex)))
        return 3

    log.info("Successfully analyzed %s in %fs", source, time.perf_counter() - begin)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
