"""
Layout Export — builds the mandala graph from a layout file and writes the
centrality table and connectivity list.

Usage:
  python layout_export.py layout.json                     # prints CSV to terminal
  python layout_export.py layout.json -o out/             # writes CSV + connectivity JSON
  python layout_export.py layout.json -o out/ -g          # also writes the graph document
  python layout_export.py layout.json --no-ring           # radial spokes only

The layout file holds {"motifs": [...], "gridOrder": 8, "edgeTopology": {...}}.
"""

import argparse
import json
import logging
import os
import sys

from pydantic import ValidationError

from mandala.engine.analysis import analyze_layout
from mandala.engine.motifs import EdgeTopology
from mandala.export.connectivity import CONNECTIVITY_FILENAME, connectivity_document, graph_document
from mandala.export.table import CSV_FILENAME, rows_to_csv
from mandala.models.requests import LayoutRequest

GRAPH_FILENAME = "mandala_graph.json"

logger = logging.getLogger("layout_export")


def load_layout(path):
    """Read and normalize a layout file. Raises ValueError on bad input."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read {path}: {e}") from e

    try:
        return LayoutRequest.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid layout in {path}: {e}") from e


def write_json(path, payload):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    print(f"  Saved: {path}")


def export_layout(req, output_dir=None, include_graph=False, radial=True, ring=True):
    topology = req.to_topology()
    topology = EdgeTopology(radial=topology.radial and radial, ring=topology.ring and ring)

    result = analyze_layout(req.to_motifs(), req.grid_order, topology)
    csv_text = rows_to_csv(result.rows)

    if output_dir is None:
        sys.stdout.write(csv_text)
        return result

    os.makedirs(output_dir, exist_ok=True)
    csv_path = os.path.join(output_dir, CSV_FILENAME)
    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        f.write(csv_text)
    print(f"  Saved: {csv_path}")

    write_json(os.path.join(output_dir, CONNECTIVITY_FILENAME), connectivity_document(result.graph, topology))
    if include_graph:
        write_json(os.path.join(output_dir, GRAPH_FILENAME), graph_document(result.graph))

    print(f"  {result.graph.num_nodes} nodes, {result.graph.edge_count} edges, "
          f"{result.graph.layer_count} layers")
    return result


def main():
    parser = argparse.ArgumentParser(description="Mandala layout export — centrality table + connectivity")
    parser.add_argument("input", help="Layout JSON file")
    parser.add_argument("-o", "--output", help="Output folder")
    parser.add_argument("-g", "--graph", action="store_true", help="Also save the node/edge graph document")
    parser.add_argument("--no-radial", action="store_true", help="Drop radial (spoke) edges")
    parser.add_argument("--no-ring", action="store_true", help="Drop ring edges")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        req = load_layout(args.input)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    export_layout(
        req,
        output_dir=args.output,
        include_graph=args.graph,
        radial=not args.no_radial,
        ring=not args.no_ring,
    )


if __name__ == "__main__":
    main()
