"""
The wnio.network.base module includes the enums used to tag network
element categories.

.. rubric:: Contents

.. autosummary::

    NodeType
    LinkType

"""
import enum


class NodeType(enum.IntEnum):
    """
    Enum class for node types.

    .. rubric:: Enum Members

    .. autosummary::

        Junction
        Reservoir
        Tank


    """
    Junction = 0  #: node is a junction
    Reservoir = 1  #: node is a reservoir
    Tank = 2  #: node is a tank

    def __str__(self):
        return self.name


class LinkType(enum.IntEnum):
    """
    Enum class for link types.

    .. rubric:: Enum Members

    .. autosummary::

        Pipe
        Pump


    """
    Pipe = 1  #: link is a pipe
    Pump = 2  #: link is a pump

    def __str__(self):
        return self.name
