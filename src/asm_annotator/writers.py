from __future__ import annotations
from datetime import datetime
from typing import Iterable, List

VERSION = "0.1.0"
TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
# bytes que no son UTF-8 pasan tal cual de la entrada a la salida
SOURCE_ERRORS = "surrogateescape"

def render_header(architecture: str, *, now: datetime) -> List[str]:
    return [
        "; INFORMATION:\n",
        f"; \tAssembly Analyzer Version: {VERSION}\n",
        f"; \tAnalyzed on: {now.strftime(TIMESTAMP_FMT)}\n",
        f"; \tInstruction Set Architecture: {architecture}\n",
        "\n",
    ]

def render_line(line: str, comment: str) -> str:
    if not comment:
        return line + "\n"
    return f"{line}\t\t; {comment}\n"

def write_annotated(chunks: Iterable[str], path: str) -> None:
    with open(path, "w", encoding="utf-8", errors=SOURCE_ERRORS) as f:
        for chunk in chunks:
            f.write(chunk)
