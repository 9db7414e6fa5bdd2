"""
The wnio.network.model module includes the network definition read from an
EPANET INP file.

.. rubric:: Contents

.. autosummary::

    NetworkDefinition

"""
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .elements import Junction, Tank, Reservoir, Pipe, Pump, Node, Link

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkDefinition:
    """
    Network elements read from an EPANET INP file.

    Each category holds its records in the order they appear in the file.
    Names are only unique within a category, and link end nodes are not
    checked against the node categories.

    .. rubric:: Attributes

    .. autosummary::

        name
        junctions
        tanks
        reservoirs
        pipes
        pumps
        skipped

    """

    name: Optional[str] = None
    junctions: Tuple[Junction, ...] = ()
    tanks: Tuple[Tank, ...] = ()
    reservoirs: Tuple[Reservoir, ...] = ()
    pipes: Tuple[Pipe, ...] = ()
    pumps: Tuple[Pump, ...] = ()
    skipped: tuple = ()

    @property
    def num_nodes(self):
        """Number of junctions, tanks and reservoirs"""
        return len(self.junctions) + len(self.tanks) + len(self.reservoirs)

    @property
    def num_links(self):
        """Number of pipes and pumps"""
        return len(self.pipes) + len(self.pumps)

    def nodes(self) -> Iterator[Node]:
        """Iterate over junctions, then tanks, then reservoirs"""
        yield from self.junctions
        yield from self.tanks
        yield from self.reservoirs

    def links(self) -> Iterator[Link]:
        """Iterate over pipes, then pumps"""
        yield from self.pipes
        yield from self.pumps

    def get_node(self, name: str) -> Node:
        """
        Get the first node with a given name.

        Parameters
        ----------
        name : str
            Name of the node

        Returns
        -------
        Junction, Tank or Reservoir

        Raises
        ------
        KeyError
            If no node has this name
        """
        for node in self.nodes():
            if node.name == name:
                return node
        raise KeyError(name)

    def get_link(self, name: str) -> Link:
        """
        Get the first link with a given name.

        Parameters
        ----------
        name : str
            Name of the link

        Returns
        -------
        Pipe or Pump

        Raises
        ------
        KeyError
            If no link has this name
        """
        for link in self.links():
            if link.name == name:
                return link
        raise KeyError(name)

    def validate(self) -> bool:
        """
        Check that the network has the element categories needed for a
        hydraulic model: at least one junction, at least one pipe, and at
        least one tank or reservoir.

        This is a structural check only; connectivity is not examined.

        Returns
        -------
        bool
        """
        valid = len(self.junctions) > 0 and \
            len(self.pipes) > 0 and \
            (len(self.tanks) > 0 or len(self.reservoirs) > 0)
        if not valid:
            logger.debug('Network %s is missing junctions, pipes, or tanks and reservoirs', self.name)
        return valid

    def summary(self) -> str:
        """Element counts, one category per line"""
        return ('Nodes: {}\n'
                'Pipes: {}\n'
                'Pumps: {}\n'
                'Tanks: {}\n'
                'Reservoirs: {}\n').format(len(self.junctions), len(self.pipes), len(self.pumps),
                                           len(self.tanks), len(self.reservoirs))

    def print_summary(self):
        """Print the element counts"""
        print(self.summary(), end='')
