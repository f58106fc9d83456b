"""Per-node metric table export — records and CSV.

Rounding happens only here; the engine returns full precision.
"""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from typing import Any

from mandala.engine.analysis import AnalysisRow

CSV_FILENAME = "mandala_centrality_analysis.csv"
CSV_HEADER = ["Node ID", "Layer", "Degree", "Closeness", "Betweenness", "Eigenvector"]

_FLOAT_FIELDS = ("closeness", "betweenness", "eigenvector")


def rows_to_records(rows: list[AnalysisRow], precision: int = 4) -> list[dict[str, Any]]:
    records = []
    for row in rows:
        rec = asdict(row)
        for key in _FLOAT_FIELDS:
            rec[key] = round(rec[key], precision)
        records.append(rec)
    return records


def rows_to_csv(rows: list[AnalysisRow], precision: int = 4) -> str:
    """CSV text with a header line and fixed-width decimals."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in rows:
        writer.writerow([
            row.id,
            row.layer,
            row.degree,
            f"{row.closeness:.{precision}f}",
            f"{row.betweenness:.{precision}f}",
            f"{row.eigenvector:.{precision}f}",
        ])
    return buf.getvalue()
