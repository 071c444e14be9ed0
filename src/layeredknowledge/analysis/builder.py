"""
Knowledge Builder
=================
Declares layers and relations from plain mappings and fills every dependency
table from named data columns.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from layeredknowledge.analysis.scoring import score_matrix
from layeredknowledge.analysis.series import Series
from layeredknowledge.config import DEFAULT_MINIMUM
from layeredknowledge.model.knowledge import DomainKnowledge
from layeredknowledge.model.tables import DependencyTable, Relation

logger = logging.getLogger(__name__)


def _columns_for(knowledge: DomainKnowledge, layer: str, columns: Mapping[str, Series]) -> List[Series]:
    missing = [name for name in knowledge.get_layer(layer) if name not in columns]
    if missing:
        raise KeyError(f"No data column for variable(s) {missing} of layer '{layer}'.")
    return [columns[name] for name in knowledge.get_layer(layer)]


def fill_dependencies(
    knowledge: DomainKnowledge,
    columns: Mapping[str, Series],
    minimum: float = DEFAULT_MINIMUM,
) -> Dict[Relation, DependencyTable]:
    """
    Score every relation of ``knowledge`` from named data columns.

    All tables are computed first and only then installed, so a missing
    column leaves the container untouched.

    Args:
        knowledge: Container whose relations are to be filled.
        columns: Variable name -> series, all series of equal length.
        minimum: Forward evidence floor passed to ``score_matrix``.

    Raises:
        KeyError: If a variable of a related layer has no column.

    Returns:
        The tables that were replaced, keyed by relation.
    """
    computed: Dict[Relation, DependencyTable] = {}
    for relation in knowledge.dependencies():
        computed[relation] = score_matrix(
            _columns_for(knowledge, relation.independent, columns),
            _columns_for(knowledge, relation.dependent, columns),
            minimum,
        )

    replaced = {
        relation: knowledge.set_dependency(relation.independent, relation.dependent, table)
        for relation, table in computed.items()
    }
    logger.info(f"Filled {len(computed)} dependency tables.")
    return replaced


def build_knowledge(
    layers: Mapping[str, Optional[Sequence[str]]],
    relations: Iterable[Tuple[str, str]],
    columns: Optional[Mapping[str, Series]] = None,
    minimum: float = DEFAULT_MINIMUM,
) -> DomainKnowledge:
    """
    Declare layers and relations in one go and optionally fill the tables.

    Args:
        layers: Layer name -> ordered variable names, in declaration order.
        relations: (independent, dependent) layer pairs.
        columns: If given, data used to fill every table (see
            ``fill_dependencies``); otherwise tables are left unset.
        minimum: Forward evidence floor.

    Raises:
        Whatever ``DomainKnowledge.add_layer``, ``add_dependency`` or
        ``fill_dependencies`` raise.
    """
    knowledge = DomainKnowledge()
    for name, variables in layers.items():
        knowledge.add_layer(name, variables)
    for independent, dependent in relations:
        knowledge.add_dependency(independent, dependent)

    if columns is not None:
        fill_dependencies(knowledge, columns, minimum)
    return knowledge
