"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


import networkx as nx


class GridExt:
    """
    Encapsulates the networkx graph of a low voltage grid snapshot
    together with the results of a power flow calculation.

    Buses (:class:`~.lvgridext.core.network.BusExt`) are the nodes of the
    graph. Each section (:class:`~.lvgridext.core.network.SectionExt`) is
    an edge keyed by the section object itself and is accessible via the
    edge attribute 'section'. Since sections are used as keys, parallel
    sections between the same pair of buses are kept apart.

    Parameters
    ----------
    name : :obj:`str`
        Name of the grid, used for logging only

    Attributes
    ----------
    graph : :networkx:`networkx.MultiGraph`
        The networkx graph of the grid
    """

    def __init__(self, **kwargs):
        self.name = kwargs.get('name', None)

        self._graph = nx.MultiGraph()

    @property
    def graph(self):
        """Provide access to the graph"""
        return self._graph

    def add_bus(self, bus):
        """
        Adds a bus to the grid graph if not already existing

        Parameters
        ----------
        bus : :class:`~.lvgridext.core.network.BusExt`
            Bus to be added. Its `grid` is set to this grid.
        """
        if not isinstance(bus, BusExt):
            raise ValueError('{} is not a BusExt object.'.format(bus))
        if bus not in self._graph.nodes():
            self._graph.add_node(bus)
        bus.grid = self

    def add_section(self, section):
        """
        Adds a section and both of its buses to the grid graph

        Parameters
        ----------
        section : :class:`~.lvgridext.core.network.SectionExt`
            Section to be added. Its `grid` is set to this grid.
        """
        if not isinstance(section, SectionExt):
            raise ValueError('{} is not a SectionExt object.'.format(section))
        bus_0, bus_1 = section.connected_buses
        self.add_bus(bus_0)
        self.add_bus(bus_1)
        if not self._graph.has_edge(bus_0, bus_1, key=section):
            self._graph.add_edge(bus_0, bus_1, key=section, section=section)
        section.grid = self

    def buses(self):
        """
        Returns a generator for iterating over grid's buses

        Returns
        -------
        :obj:`list` generator
            Generator of :class:`~.lvgridext.core.network.BusExt` objects
        """
        for bus in self._graph.nodes():
            yield bus

    def buses_count(self):
        """Returns the count of buses in grid"""
        return self._graph.number_of_nodes()

    def sections(self):
        """
        Returns a generator for iterating over grid's sections

        Returns
        -------
        :obj:`list` generator
            Generator of :class:`~.lvgridext.core.network.SectionExt` objects
        """
        for _, _, section in self._graph.edges(keys=True):
            yield section

    def sections_count(self):
        """Returns the count of sections in grid"""
        return self._graph.number_of_edges()

    def slack(self):
        """
        Returns the slack bus of the grid

        Returns
        -------
        :class:`~.lvgridext.core.network.BusExt`
            First bus flagged as slack, None if there is no such bus
        """
        for bus in self.buses():
            if bus.slack:
                return bus
        return None

    def graph_sections_from_bus(self, bus):
        """ Returns sections that are connected to `bus`

        Parameters
        ----------
        bus : :class:`~.lvgridext.core.network.BusExt`
            Bus, member of graph

        Returns
        -------
        :obj:`list`
            List of :class:`~.lvgridext.core.network.SectionExt` objects
            in the order they have been added to the grid
        """
        if bus not in self._graph.nodes():
            return []
        return [section for _, _, section in self._graph.edges(bus, keys=True)]

    def graph_buses_from_section(self, section):
        """
        Returns buses that are connected by `section`

        Parameters
        ----------
        section : :class:`~.lvgridext.core.network.SectionExt`

        Returns
        -------
        :obj:`tuple`
            2-tuple of :class:`~.lvgridext.core.network.BusExt` objects
        """
        return section.connected_buses

    def find_path(self, bus_source, bus_target, type='buses', weight=None):
        """
        Determines shortest path

        Determines the shortest path from `bus_source` to `bus_target`
        in the grid graph using networkx' shortest path algorithm.

        Parameters
        ----------
        bus_source : :class:`~.lvgridext.core.network.BusExt`
            source bus, member of graph
        bus_target : :class:`~.lvgridext.core.network.BusExt`
            target bus, member of graph
        type : :obj:`str`
            Specify if 'buses' or 'sections' should be returned. Default
            is 'buses'
        weight : :obj:`str`
            None counts hops, 'length' uses the sections' lengths.
            Sections without length count as 1 m.

        Returns
        -------
        :obj:`list`
            Ordered list of buses or sections from `bus_source` to
            `bus_target`

        Note
        -----
        If two buses are linked by parallel sections, the shortest one is part
        of the returned path when routing by length. Otherwise the section
        carrying the highest specific current is part of it.
        """
        if (bus_source not in self._graph.nodes()) or \
                (bus_target not in self._graph.nodes()):
            raise ValueError('At least one of the buses is not a member of graph.')
        if type not in ('buses', 'sections'):
            raise ValueError('Please specify type as buses or sections')

        if weight == 'length':
            path = nx.shortest_path(self._graph, bus_source, bus_target,
                                    weight=_section_length)
        elif weight is None:
            path = nx.shortest_path(self._graph, bus_source, bus_target)
        else:
            raise ValueError('Please specify weight as None or length')

        if type == 'buses':
            return path

        sections = []
        for bus_0, bus_1 in zip(path[:-1], path[1:]):
            parallel = list(self._graph.get_edge_data(bus_0, bus_1).keys())
            if weight == 'length':
                sections.append(min(parallel, key=_length_or_default))
            else:
                sections.append(max(parallel,
                                    key=lambda _: _.abs_specific_current))
        return sections

    def graph_path_length(self, bus_source, bus_target):
        """
        Calculates the absolute distance between `bus_source` and
        `bus_target` in meters using find_path() and sections' lengths

        Parameters
        ----------
        bus_source : :class:`~.lvgridext.core.network.BusExt`
            source bus, member of graph
        bus_target : :class:`~.lvgridext.core.network.BusExt`
            target bus, member of graph

        Returns
        -------
        :obj:`float`
            path length in meters
        """
        length = 0
        for section in self.find_path(bus_source, bus_target,
                                      type='sections', weight='length'):
            length += section.length or 0

        return length

    def graph_isolated_buses(self):
        """
        Finds isolated buses = buses with no sections connected

        Returns
        -------
        :obj:`list`
            List of :class:`~.lvgridext.core.network.BusExt` objects
        """
        return sorted(nx.isolates(self._graph), key=lambda _: repr(_))

    def __repr__(self):
        return 'lv_grid_' + str(self.name)


def _length_or_default(section):
    return 1 if section.length is None else section.length


def _section_length(bus_0, bus_1, parallel_sections):
    # MultiGraph passes the attribute dicts of all parallel edges
    return min(_length_or_default(attr['section'])
               for attr in parallel_sections.values())


class BusExt:
    """ Bus (node) of a LV grid with the per-unit voltage of a power flow

    Attributes
    ----------
    name : :obj:`str` or :obj:`int`
        Name of the bus
    pu_voltage : :obj:`float`
        Voltage magnitude in p.u., nominal voltage is 1.0
    grid : :class:`~.lvgridext.core.network.GridExt`
        The grid this bus is part of, set when added to a grid
    slack : :obj:`bool`
        True if the bus is the voltage reference of the grid (e.g. the
        bus bar of the MV/LV substation)

    Note
    -----
    Buses are compared by identity, two buses with equal names are
    distinct.
    """

    def __init__(self, **kwargs):
        self.name = kwargs.get('name', None)
        self.pu_voltage = kwargs.get('pu_voltage', 1.0)
        self.grid = kwargs.get('grid', None)
        self.slack = kwargs.get('slack', False)

    @property
    def connected_sections(self):
        """
        Sections connected to this bus

        Returns
        -------
        :obj:`list`
            List of :class:`~.lvgridext.core.network.SectionExt` objects,
            empty if the bus is not part of a grid
        """
        if self.grid is None:
            return []
        return self.grid.graph_sections_from_bus(self)

    def __repr__(self):
        return 'Bus_' + str(self.name)


class SectionExt:
    """ Cable section between exactly two buses of a LV grid

    Attributes
    ----------
    connected_buses : :obj:`tuple`
        2-tuple of :class:`~.lvgridext.core.network.BusExt` objects. The
        order carries no meaning.
    abs_specific_current : :obj:`float`
        Absolute current of the section divided by its rated current.
        Values above 1 indicate thermal overloading.
    length : :obj:`float`
        Length of the section given in m, optional
    name : :obj:`str`
        Name of the section, optional
    grid : :class:`~.lvgridext.core.network.GridExt`
        The grid this section is part of, set when added to a grid
    """

    def __init__(self, **kwargs):
        buses = tuple(kwargs.get('buses', ()))
        if len(buses) != 2:
            raise ValueError('A section connects exactly two buses, '
                             'got {}.'.format(len(buses)))
        if buses[0] is buses[1]:
            raise ValueError('A section cannot connect {} with itself.'.format(
                buses[0]))

        self._buses = buses
        self.abs_specific_current = kwargs.get('abs_specific_current', 0.0)
        self.length = kwargs.get('length', None)
        self.name = kwargs.get('name', None)
        self.grid = kwargs.get('grid', None)

    @property
    def connected_buses(self):
        """Both buses connected by this section"""
        return self._buses

    def __repr__(self):
        if self.name is not None:
            return 'Section_' + str(self.name)
        buses = sorted(self._buses, key=lambda _: repr(_))
        return '_'.join(['Section', repr(buses[0]), repr(buses[1])])
