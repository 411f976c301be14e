import pytest

from lvgridext.core.network import GridExt, BusExt, SectionExt
from lvgridext.flexopt.check_tech_constraints import \
    get_critical_section_loading, get_critical_voltage_at_buses, \
    check_load, check_voltage
from lvgridext.tools.example_grids import radial_grid_current_overload, \
    loop_grid_voltage_deviation, get_bus, get_section


@pytest.fixture
def overloaded_grid():
    """
    Returns a GridExt object with a feeder slack - a - b where both
    sections are overloaded and both buses violate the voltage band
    """
    grid = GridExt(name='overloaded')
    slack = BusExt(name='slack', slack=True)
    a = BusExt(name='a', pu_voltage=0.93)
    b = BusExt(name='b', pu_voltage=0.91)
    grid.add_section(SectionExt(buses=(slack, a), abs_specific_current=1.4))
    grid.add_section(SectionExt(buses=(a, b), abs_specific_current=1.1))
    return grid


def test_get_critical_section_loading(overloaded_grid):
    crit_sections = get_critical_section_loading(overloaded_grid)
    assert [_['loading'] for _ in crit_sections] == [1.4, 1.1]


def test_get_critical_section_loading_none():
    assert get_critical_section_loading(radial_grid_current_overload()) == []


def test_get_critical_section_loading_tolerable(tolerable_loading):
    grid = radial_grid_current_overload()
    crit_sections = get_critical_section_loading(grid)
    assert [_['section'] for _ in crit_sections] == \
        [get_section(grid, 'slack', 7)]
    assert crit_sections[0]['loading'] == pytest.approx(73.18490378 / 275)


def test_get_critical_voltage_at_buses(overloaded_grid):
    crit_buses = get_critical_voltage_at_buses(overloaded_grid)
    assert [_['bus'].name for _ in crit_buses] == ['b', 'a']
    assert crit_buses[0]['v_diff'] == pytest.approx(0.09)


def test_get_critical_voltage_at_buses_over_voltage():
    grid = GridExt()
    grid.add_section(SectionExt(buses=(BusExt(name='slack', slack=True),
                                       BusExt(name='pv', pu_voltage=1.07))))
    assert [_['bus'].name for _ in get_critical_voltage_at_buses(grid)] == \
        ['pv']


def test_get_critical_voltage_at_buses_radial():
    grid = radial_grid_current_overload()
    crit_buses = get_critical_voltage_at_buses(grid)
    assert [_['bus'] for _ in crit_buses] == \
        [get_bus(grid, 12), get_bus(grid, 11), get_bus(grid, 10)]


def test_check_load_and_voltage(overloaded_grid):
    assert len(check_load(overloaded_grid)) == 2
    assert len(check_voltage(overloaded_grid)) == 2
    assert check_voltage(loop_grid_voltage_deviation()) == []
