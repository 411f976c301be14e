"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


class GridNavigator(object):
    """Base class of route providers used by the grid extension

    Each grid might have characteristics that can be exploited to speed up
    the route finding. Subclasses implement
    :meth:`~.lvgridext.core.network.navigators.GridNavigator.shortest_route`
    for their topology.
    """

    def shortest_route(self, start_bus, goal_bus):
        """Finds the shortest route between `start_bus` and `goal_bus`

        Parameters
        ----------
        start_bus : :class:`~.lvgridext.core.network.BusExt`
            The bus at which the sequence of sections starts
        goal_bus : :class:`~.lvgridext.core.network.BusExt`
            The bus at which the sequence of sections ends

        Returns
        -------
        :obj:`list`
            Sequence of :class:`~.lvgridext.core.network.SectionExt`
            objects following the route from `start_bus` to `goal_bus`.
            The sequence is not checked by the caller, so the
            implementation has to provide a connected route.
        """
        raise NotImplementedError(
            '{} does not implement shortest_route()'.format(
                self.__class__.__name__))


class GraphNavigator(GridNavigator):
    """Brute-force route provider based on networkx' shortest path search

    Parameters
    ----------
    grid : :class:`~.lvgridext.core.network.GridExt`
        Grid to search routes in
    weight : :obj:`str`
        None to count sections, 'length' to minimize the cable length
    """

    def __init__(self, grid, weight=None):
        self.grid = grid
        self.weight = weight

    def shortest_route(self, start_bus, goal_bus):
        return self.grid.find_path(start_bus, goal_bus,
                                   type='sections', weight=self.weight)
