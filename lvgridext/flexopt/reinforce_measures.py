"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


# extension of LV grids by additional cables
import logging

from lvgridext.core.exceptions import InvalidParameterError
from lvgridext.flexopt.feeder import extend_along_feeder, \
    find_main_feeder, find_centre_bus, find_low_extension_bus, \
    find_high_extension_bus
from lvgridext.flexopt.overloads import OverloadTracker
from lvgridext.tools import config as cfg_lvgridext

cfg_lvgridext.load_config('config_calc.cfg')

logger = logging.getLogger('lvgridext')


class LVGridExtension(object):
    """
    Determines the buses between which a new cable is to be built to
    relieve the worst thermal overload or voltage bound violation of a LV
    grid.

    Overloads found in a power flow snapshot are reported via
    :meth:`report_current_overload` and :meth:`report_voltage_overload`,
    afterwards :meth:`find_buses_to_extend_between` returns the two buses.
    One instance serves one snapshot at a time; call :meth:`reset` before
    reporting the overloads of the next one.

    Parameters
    ----------
    navigator : :class:`~.lvgridext.core.network.navigators.GridNavigator`
        Provides the shortest route between two buses
    relieve_factor_current : :obj:`float`
        Relieve factor for thermal overloads. Defaults to
        `relieve_factor_current` in section `grid_extension` of
        config_calc.cfg
    relieve_factor_voltage : :obj:`float`
        Relieve factor for voltage bound violations. Defaults to
        `relieve_factor_voltage` in section `grid_extension` of
        config_calc.cfg
    """

    def __init__(self, navigator, relieve_factor_current=None,
                 relieve_factor_voltage=None):
        self.navigator = navigator
        self._overloads = OverloadTracker()

        if relieve_factor_current is None:
            relieve_factor_current = cfg_lvgridext.get(
                'grid_extension', 'relieve_factor_current')
        if relieve_factor_voltage is None:
            relieve_factor_voltage = cfg_lvgridext.get(
                'grid_extension', 'relieve_factor_voltage')

        self.relieve_factor_current = relieve_factor_current
        self.relieve_factor_voltage = relieve_factor_voltage

    @property
    def relieve_factor_current(self):
        """:obj:`float` : Relieve factor for thermal overloads, between 0
        and 1"""
        return self._relieve_factor_current

    @relieve_factor_current.setter
    def relieve_factor_current(self, relieve_factor):
        self._relieve_factor_current = _check_relieve_factor(
            relieve_factor, 'thermal overloads')

    @property
    def relieve_factor_voltage(self):
        """:obj:`float` : Relieve factor for voltage bound violations,
        between 0 and 1"""
        return self._relieve_factor_voltage

    @relieve_factor_voltage.setter
    def relieve_factor_voltage(self, relieve_factor):
        self._relieve_factor_voltage = _check_relieve_factor(
            relieve_factor, 'voltage bound violations')

    def get_relieve_factor_current(self):
        return self.relieve_factor_current

    def set_relieve_factor_current(self, relieve_factor):
        self.relieve_factor_current = relieve_factor

    def get_relieve_factor_voltage(self):
        return self.relieve_factor_voltage

    def set_relieve_factor_voltage(self, relieve_factor):
        self.relieve_factor_voltage = relieve_factor

    @property
    def worst_current_overload(self):
        return self._overloads.worst_current_overload

    @property
    def worst_voltage_overload(self):
        return self._overloads.worst_voltage_overload

    def report_current_overload(self, section):
        """Report a thermally overloaded section, see
        :meth:`~.lvgridext.flexopt.overloads.OverloadTracker.report_current_overload`
        """
        self._overloads.report_current_overload(section)

    def report_voltage_overload(self, bus):
        """Report a bus with voltage bound violation, see
        :meth:`~.lvgridext.flexopt.overloads.OverloadTracker.report_voltage_overload`
        """
        self._overloads.report_voltage_overload(bus)

    def has_overloads(self):
        """True if any overload has been reported since the last reset"""
        return self._overloads.has_overloads()

    def reset(self):
        """Removes the reported overloads"""
        self._overloads.reset()

    def find_buses_to_extend_between(self):
        """
        Determines the buses between which a new cable should be built

        If a thermal overload has been reported, it is resolved first.
        Otherwise the worst voltage bound violation is resolved.

        Returns
        -------
        :obj:`tuple`
            2-tuple of :class:`~.lvgridext.core.network.BusExt` objects,
            (bus on low voltage side, bus on high voltage side). None if no
            overload has been reported.
        """
        if self.worst_current_overload is not None:
            return self.handle_current_overloads()
        if self.worst_voltage_overload is not None:
            return self.handle_voltage_overloads()
        return None

    def handle_current_overloads(self):
        """
        Determines the extension cable for the worst thermal overload

        The feeder is followed from the overloaded section in both
        directions, see
        :func:`~.lvgridext.flexopt.feeder.extend_along_feeder`.

        Returns
        -------
        :obj:`tuple`
            2-tuple of :class:`~.lvgridext.core.network.BusExt` objects,
            (bus on low voltage side, bus on high voltage side)
        """
        section = self.worst_current_overload

        high_voltage_bus = extend_along_feeder(
            section, search_up=True,
            relieve_factor=self.relieve_factor_current)
        low_voltage_bus = extend_along_feeder(
            section, search_up=False,
            relieve_factor=self.relieve_factor_current)

        logger.info('==> Thermal overload of {section} is relieved by a new '
                    'cable between {low} and {high}.'.format(
            section=section, low=low_voltage_bus, high=high_voltage_bus))

        return low_voltage_bus, high_voltage_bus

    def handle_voltage_overloads(self):
        """
        Determines the extension cable for the worst voltage bound violation

        1. The local voltage minimum and maximum of the feeder the bus is
           part of are found.
        2. The navigator provides the route between both.
        3. Starting from the bus on the route closest to nominal voltage,
           the route is followed in both directions while the voltage
           deviation stays within `relieve_factor_voltage` times the
           deviation at the respective end.

        Returns
        -------
        :obj:`tuple`
            2-tuple of :class:`~.lvgridext.core.network.BusExt` objects,
            (bus on low voltage side, bus on high voltage side)
        """
        bus = self.worst_voltage_overload

        low_voltage_end, high_voltage_end, feeder = find_main_feeder(bus)
        logger.debug('Feeder of {bus} reaches from {low} to {high} across '
                     '{cnt} sections.'.format(
            bus=bus, low=low_voltage_end, high=high_voltage_end,
            cnt=len(feeder)))

        route = list(self.navigator.shortest_route(low_voltage_end,
                                                   high_voltage_end))

        centre_bus, position = find_centre_bus(route, low_voltage_end)
        logger.debug('Voltage closest to nominal voltage on route at '
                     '{}.'.format(centre_bus))

        low_voltage_bus = find_low_extension_bus(
            route, position, low_voltage_end,
            relieve_factor=self.relieve_factor_voltage)
        high_voltage_bus = find_high_extension_bus(
            route, position, low_voltage_end, high_voltage_end,
            relieve_factor=self.relieve_factor_voltage)

        logger.info('==> Voltage bound violation at {bus} is relieved by a '
                    'new cable between {low} and {high}.'.format(
            bus=bus, low=low_voltage_bus, high=high_voltage_bus))

        return low_voltage_bus, high_voltage_bus


def _check_relieve_factor(relieve_factor, kind):
    if not 0 <= relieve_factor <= 1:
        raise InvalidParameterError(
            'The relieve factor for {kind} must be between 0 and 1, but '
            'was {value}.'.format(kind=kind, value=relieve_factor))
    return relieve_factor
