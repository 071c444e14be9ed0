"""
Layered domain knowledge: groups of time-series variables linked by acyclic,
scored layer-to-layer dependencies, projected into a variable-level DAG.
"""
from importlib.metadata import version, PackageNotFoundError

from layeredknowledge.analysis.builder import build_knowledge, fill_dependencies
from layeredknowledge.analysis.clustering import cluster_by_structure
from layeredknowledge.analysis.scoring import net_score, score, score_matrix
from layeredknowledge.analysis.series import shift_by
from layeredknowledge.model.knowledge import DomainKnowledge
from layeredknowledge.model.projection import VariableGraphProjector
from layeredknowledge.model.scores import INSUFFICIENT_EVIDENCE
from layeredknowledge.model.tables import DependencyTable, Relation
from layeredknowledge.model.variable_graph import VariableGraph

try:
    __version__ = version("layeredknowledge")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "DependencyTable",
    "DomainKnowledge",
    "INSUFFICIENT_EVIDENCE",
    "Relation",
    "VariableGraph",
    "VariableGraphProjector",
    "build_knowledge",
    "cluster_by_structure",
    "fill_dependencies",
    "net_score",
    "score",
    "score_matrix",
    "shift_by",
]
