# coding: utf-8
"""
The wnio.network.elements module includes the network element records
read from an EPANET INP file.

Nodes are one of a closed set of categories (see
:class:`~wnio.network.base.NodeType`); each record carries its category tag,
a coordinate pair and the fields specific to that category. Links carry a
:class:`~wnio.network.base.LinkType` tag.

.. rubric:: Contents

.. autosummary::

    Junction
    Tank
    Reservoir
    Pipe
    Pump

"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from .base import NodeType, LinkType


def _freeze_attributes(record):
    # frozen records need object.__setattr__
    object.__setattr__(record, 'attributes', MappingProxyType(dict(record.attributes)))


@dataclass(frozen=True)
class Junction:
    """A junction node.

    Parameters
    ----------
    name : str
        Name of the junction
    x : float
        X coordinate, by default 0.0
    y : float
        Y coordinate, by default 0.0
    attributes : mapping
        Additional key/value fields from the junction line
    """

    name: str
    x: float = 0.0
    y: float = 0.0
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    node_type: NodeType = field(default=NodeType.Junction, init=False)

    def __post_init__(self):
        _freeze_attributes(self)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Tank:
    """A storage tank node.

    Parameters
    ----------
    name : str
        Name of the tank
    x : float
        X coordinate
    y : float
        Y coordinate
    init_level : float
        Initial water level
    min_level : float
        Minimum water level
    max_level : float
        Maximum water level, by default 0.0
    diameter : float
        Tank diameter, by default 0.0
    attributes : mapping
        Additional key/value fields from the tank line
    """

    name: str
    x: float
    y: float
    init_level: float
    min_level: float
    max_level: float = 0.0
    diameter: float = 0.0
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    node_type: NodeType = field(default=NodeType.Tank, init=False)

    def __post_init__(self):
        _freeze_attributes(self)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Reservoir:
    """A reservoir node (fixed head boundary).

    Parameters
    ----------
    name : str
        Name of the reservoir
    x : float
        X coordinate
    y : float
        Y coordinate
    total_head : float
        Total head, by default 0.0
    attributes : mapping
        Additional key/value fields from the reservoir line
    """

    name: str
    x: float
    y: float
    total_head: float = 0.0
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    node_type: NodeType = field(default=NodeType.Reservoir, init=False)

    def __post_init__(self):
        _freeze_attributes(self)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Pipe:
    """A pipe link.

    The start and end node names are not checked against the nodes in the
    network.
    """

    name: str
    start_node_name: str
    end_node_name: str
    length: float
    diameter: float
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    link_type: LinkType = field(default=LinkType.Pipe, init=False)

    def __post_init__(self):
        _freeze_attributes(self)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Pump:
    """A pump link."""

    name: str
    start_node_name: str
    end_node_name: str
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    link_type: LinkType = field(default=LinkType.Pump, init=False)

    def __post_init__(self):
        _freeze_attributes(self)

    def __str__(self):
        return self.name


Node = Union[Junction, Tank, Reservoir]
Link = Union[Pipe, Pump]
