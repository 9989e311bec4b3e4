"""Loading composition tables and phase definitions from files.

Two table layouts are accepted:

``sections`` (default)::

    # mole fraction, value
    [enthalpy]
    0.0, -10000.0
    1.0, -12000.0
    [entropy]
    0.0  12.5
    1.0  14.0

``columns``: one ``x h s`` row per line, no section headers.

A phase document is JSON; see :func:`build_phase`.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from tabthermo.constants import P_REF, T_REF
from tabthermo.exceptions import InvalidTableError
from tabthermo.models import Species
from tabthermo.table import Table, TableSet
from tabthermo.thermo import ConstDensityThermo, TabulatedThermo

logger = logging.getLogger(__name__)

TABLE_NAMES = ("enthalpy", "entropy")
_SEPARATOR = re.compile(r"[,;\s]+")
_SECTION = re.compile(r"^\[\s*(\w+)\s*\]$")


def _split_row(line: str, lineno: int, columns: int) -> List[float]:
    fields = [f for f in _SEPARATOR.split(line) if f]
    if len(fields) != columns:
        raise InvalidTableError(
            f"Line {lineno}: expected {columns} columns, got {len(fields)}"
        )
    try:
        return [float(f) for f in fields]
    except ValueError:
        raise InvalidTableError(f"Line {lineno}: non-numeric value in {line!r}") from None


def _content_lines(text: str):
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if line:
            yield lineno, line


def _build_tables(rows: Mapping[str, List[Tuple[float, float]]], source: str) -> TableSet:
    tables = {}
    for name in TABLE_NAMES:
        if not rows.get(name):
            raise InvalidTableError(f"{source}: missing {name} table")
        try:
            tables[name] = Table.from_pairs(rows[name])
        except InvalidTableError as exc:
            raise InvalidTableError(f"{source}: {name} table: {exc}") from exc
    return TableSet(enthalpy=tables["enthalpy"], entropy=tables["entropy"])


def parse_sectioned_tables(text: str, source: str = "<string>") -> TableSet:
    rows: Dict[str, List[Tuple[float, float]]] = {}
    current = None
    for lineno, line in _content_lines(text):
        header = _SECTION.match(line)
        if header:
            current = header.group(1).lower()
            if current not in TABLE_NAMES:
                raise InvalidTableError(f"Line {lineno}: unknown section [{current}]")
            if current in rows:
                raise InvalidTableError(f"Line {lineno}: repeated section [{current}]")
            rows[current] = []
            continue
        if current is None:
            raise InvalidTableError(f"Line {lineno}: data before any section header")
        x, y = _split_row(line, lineno, 2)
        rows[current].append((x, y))
    return _build_tables(rows, source)


def parse_column_tables(text: str, source: str = "<string>") -> TableSet:
    rows: Dict[str, List[Tuple[float, float]]] = {"enthalpy": [], "entropy": []}
    for lineno, line in _content_lines(text):
        x, h, s = _split_row(line, lineno, 3)
        rows["enthalpy"].append((x, h))
        rows["entropy"].append((x, s))
    return _build_tables(rows, source)


_PARSERS = {
    "sections": parse_sectioned_tables,
    "columns": parse_column_tables,
}


def read_tables(path: str | Path, fmt: str = "sections") -> TableSet:
    """Read the enthalpy and entropy tables from a text file."""
    try:
        parser = _PARSERS[fmt]
    except KeyError:
        raise InvalidTableError(f"Unknown table format: {fmt}") from None
    p = Path(path)
    tables = parser(p.read_text(encoding="utf-8"), source=str(p))
    logger.info(
        f"Loaded tables from {p}: {tables.enthalpy.size()} enthalpy points, "
        f"{tables.entropy.size()} entropy points"
    )
    return tables


def _inline_table(data: Any, name: str) -> Table:
    if not isinstance(data, list):
        raise InvalidTableError(f"{name} table must be a list of [x, y] pairs")
    try:
        return Table.from_pairs(data)
    except InvalidTableError as exc:
        raise InvalidTableError(f"{name} table: {exc}") from exc


def _parse_species(data: Mapping[str, Any]) -> List[Species]:
    species = []
    for name, p in data.items():
        species.append(
            Species(
                name=name,
                molecular_weight=float(p["mw"]),
                heat_capacity=float(p.get("cp", 0.0)),
                heat_of_formation=float(p.get("h_form", 0.0)),
                standard_entropy=float(p.get("s0", 0.0)),
                formula=p.get("formula", ""),
            )
        )
    return species


def build_phase(config: Mapping[str, Any], base_dir: str | Path = ".") -> TabulatedThermo:
    """Build a tabulated phase from a parsed phase document.

    Example::

        {
          "name": "graphite-anode",
          "density": 2260.0,
          "temperature": 298.15,
          "species": {
            "Li[anode]": {"mw": 0.07994, "cp": 0.0, "h_form": 0.0, "s0": 0.0},
            "V[anode]": {"mw": 0.07300, "cp": 0.0, "h_form": 0.0, "s0": 0.0}
          },
          "mole_fractions": {"Li[anode]": 0.5, "V[anode]": 0.5},
          "tabulated": {"species": "Li[anode]", "data_file": "lithiated.csv",
                        "format": "sections"}
        }

    ``tabulated`` may carry inline ``enthalpy`` and ``entropy`` pair lists
    instead of ``data_file``. Relative data files resolve against ``base_dir``.
    """
    species = _parse_species(config["species"])
    phase = ConstDensityThermo(
        species,
        density=float(config["density"]),
        temperature=float(config.get("temperature", T_REF)),
        pressure=float(config.get("pressure", P_REF)),
    )
    if "mole_fractions" in config:
        phase.set_mole_fractions(config["mole_fractions"])

    tab = config["tabulated"]
    tracked_index = phase.species_index(tab["species"])
    if "data_file" in tab:
        data_file = Path(tab["data_file"])
        if not data_file.is_absolute():
            data_file = Path(base_dir) / data_file
        tables = read_tables(data_file, tab.get("format", "sections"))
    else:
        if "enthalpy" not in tab or "entropy" not in tab:
            raise InvalidTableError(
                "tabulated needs either data_file or inline enthalpy and entropy tables"
            )
        tables = TableSet(
            enthalpy=_inline_table(tab["enthalpy"], "enthalpy"),
            entropy=_inline_table(tab["entropy"], "entropy"),
        )

    logger.info(
        f"Built phase {config.get('name', '<unnamed>')!r} with "
        f"{phase.n_species} species, tracking {tab['species']!r}"
    )
    return TabulatedThermo(phase, tracked_index, tables)


def load_phase(path: str | Path) -> TabulatedThermo:
    """Load a tabulated phase from a JSON document."""
    p = Path(path)
    with open(p, "r", encoding="utf-8") as f:
        config = json.load(f)
    return build_phase(config, base_dir=p.parent)
