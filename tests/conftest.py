import pytest

from lvgridext.tools import config as cfg_lvgridext


@pytest.fixture
def tolerable_loading():
    """
    Lowers the tolerable specific current of LV cables to 0.25 and restores
    the configured value on finishing the test
    """
    cfg_lvgridext.load_config('config_calc.cfg')
    load_factor = cfg_lvgridext.get('assumptions', 'load_factor_lv_cable')
    cfg_lvgridext.set('assumptions', 'load_factor_lv_cable', 0.25)
    yield 0.25
    cfg_lvgridext.set('assumptions', 'load_factor_lv_cable', load_factor)
