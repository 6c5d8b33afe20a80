import pathlib
from typing import Iterable, Optional, TextIO

import click
from overrides import override

from .net import Edge, Path

NEIGHBOR_TABLE_HEADER = "Neighbor table"
CLOSURE_HEADER = "R* table"
PATH_FOUND = "Yes Path Exists!"
PATH_NOT_FOUND = "No Path Exists!"


class EdgeWriter:
    def write_line(self, line: str) -> None:
        raise Exception("not implemented")

    def write_closure(self, edges: Iterable[Edge]) -> int:
        self.write_line(CLOSURE_HEADER)
        count = 0
        for edge in edges:
            self.write_line(format_edge(edge))
            count += 1
        return count


class ConsoleWriter(EdgeWriter):
    @override
    def write_line(self, line: str) -> None:
        click.echo(line)


class FileWriter(EdgeWriter):
    def __init__(self, file: TextIO):
        self.file = file

    @override
    def write_line(self, line: str) -> None:
        self.file.write(line + "\n")


def format_edge(edge: Edge) -> str:
    source, target = edge
    return f"{source} -> {target}"


def format_path(path: Path) -> str:
    return "=>".join(str(node) for node in path)


def format_path_result(path: Optional[Path]) -> list[str]:
    if path is None:
        return [PATH_NOT_FOUND]
    return [PATH_FOUND, format_path(path)]


def format_matrix(rows: list[list[int]]) -> list[str]:
    lines = [NEIGHBOR_TABLE_HEADER]
    for row in rows:
        lines.append("".join(f"{value} " for value in row))
    lines.append("")
    return lines


def output_path(input_path, prefix: str = "out-") -> pathlib.Path:
    path = pathlib.Path(input_path)
    return path.with_name(prefix + path.name)
