"""This file is part of LVGRIDEXT, the Low Voltage GRID EXTension planner.
LVGRIDEXT determines where an additional cable relieves thermal overloads
and voltage bound violations in low voltage distribution grids, based on
the results of a power flow calculation."""

__copyright__  = "LVGRIDEXT development group"
__license__    = "GNU Affero General Public License Version 3 (AGPL-3.0)"
__author__     = "LVGRIDEXT development group"


import logging

logger = logging.getLogger('lvgridext')


class OverloadTracker(object):
    """Keeps the worst reported thermal overload and the worst reported
    voltage bound violation of one power flow snapshot

    Attributes
    ----------
    worst_current_overload : :class:`~.lvgridext.core.network.SectionExt`
        Section with the highest specific current reported, None if no
        thermal overload has been reported
    worst_voltage_overload : :class:`~.lvgridext.core.network.BusExt`
        Bus with the largest deviation from nominal voltage reported, None
        if no voltage bound violation has been reported
    """

    def __init__(self):
        self.worst_current_overload = None
        self.worst_voltage_overload = None

    def report_current_overload(self, section):
        """Report a section that turned out to be overloaded

        The section replaces the tracked one only if it carries a strictly
        higher specific current.

        Parameters
        ----------
        section : :class:`~.lvgridext.core.network.SectionExt`
            Thermally overloaded section
        """
        if self.worst_current_overload is None or \
                section.abs_specific_current > \
                self.worst_current_overload.abs_specific_current:
            logger.debug('Worst thermal overload is now {} ({:.3f}).'.format(
                section, section.abs_specific_current))
            self.worst_current_overload = section

    def report_voltage_overload(self, bus):
        """Report a bus with a voltage bound violation

        The bus replaces the tracked one only if its voltage deviates
        strictly more from nominal voltage.

        Parameters
        ----------
        bus : :class:`~.lvgridext.core.network.BusExt`
            Bus with voltage bound violation
        """
        if self.worst_voltage_overload is None or \
                abs(bus.pu_voltage - 1) > \
                abs(self.worst_voltage_overload.pu_voltage - 1):
            logger.debug('Worst voltage bound violation is now {} '
                         '({:.4f} p.u.).'.format(bus, bus.pu_voltage))
            self.worst_voltage_overload = bus

    def has_overloads(self):
        """True if any overload has been reported since the last reset"""
        return (self.worst_current_overload is not None) or \
               (self.worst_voltage_overload is not None)

    def reset(self):
        """Removes the reported overloads"""
        self.worst_current_overload = None
        self.worst_voltage_overload = None
