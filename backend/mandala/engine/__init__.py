"""Mandala graph engine — layer grouping, graph construction and centrality metrics."""

from mandala.engine.analysis import AnalysisResult, AnalysisRow, Analyzer, analyze_layout, create_analyzer
from mandala.engine.builder import rebuild_graph
from mandala.engine.config import AnalysisConfig
from mandala.engine.graph import CENTER_NODE_ID, Edge, EdgeKind, Graph, Node, build_adjacency
from mandala.engine.layers import Layer, group_layers
from mandala.engine.motifs import CenterMotif, EdgeTopology, GlobalParams, Motif, RingMotif, classify_motif
from mandala.engine.registry import MetricRegistry, MetricSpec, get_registry, load_builtin_metrics, metric

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "AnalysisRow",
    "Analyzer",
    "CENTER_NODE_ID",
    "CenterMotif",
    "Edge",
    "EdgeKind",
    "EdgeTopology",
    "GlobalParams",
    "Graph",
    "Layer",
    "MetricRegistry",
    "MetricSpec",
    "Motif",
    "Node",
    "RingMotif",
    "analyze_layout",
    "build_adjacency",
    "classify_motif",
    "create_analyzer",
    "get_registry",
    "group_layers",
    "load_builtin_metrics",
    "metric",
    "rebuild_graph",
]
