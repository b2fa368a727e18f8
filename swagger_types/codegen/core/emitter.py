"""
Assembly of rendered declarations into the final output.
"""

from typing import List, Mapping

from .errors import MissingDefinitionError
from .graph import DependencyGraph


class Emitter:
    """Orders rendered declarations and prefixes them with a header line."""

    def __init__(self, header: str, separator: str = "\n\n"):
        self.header = header
        self.separator = separator

    def emit(self, graph: DependencyGraph, rendered: Mapping[str, str]) -> List[str]:
        """
        Produce the header followed by each declaration in dependency order.

        Args:
            graph: Completed dependency graph
            rendered: Declaration text keyed by type name

        Returns:
            Output blocks, header first

        Raises:
            MissingDefinitionError: If a graph node has no rendered text
        """
        blocks = [self.header]
        for name in graph.overall_order():
            if name not in rendered:
                raise MissingDefinitionError(name)
            blocks.append(rendered[name])
        return blocks

    def render(self, graph: DependencyGraph, rendered: Mapping[str, str]) -> str:
        """Join the emitted blocks with blank lines, ending in a newline."""
        return self.separator.join(self.emit(graph, rendered)) + "\n"
