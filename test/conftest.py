import pytest
import numpy as np

# Sample BLQ file with two stations
_BLQ_TEXT = """\
$$ Ocean loading displacement
$$
$$ Columns: M2 S2 N2 K2 K1 O1 P1 Q1 Mf Mm Ssa
$$
  ONSA
$$ Complete FES2004
$$ Computed by OLFG, H.-G. Scherneck, Onsala Space Observatory
$$ onsala,                              lon/lat:   11.9264   57.3958    0.000
  .00344 .00121 .00078 .00033 .00184 .00111 .00061 .00013 .00026 .00021 .00014
  .00103 .00026 .00034 .00007 .00074 .00043 .00022 .00006 .00013 .00005 .00003
  .00075 .00026 .00017 .00007 .00061 .00031 .00019 .00005 .00002 .00001 .00001
   -64.7  -52.0  -96.2  -55.2  -58.8 -151.4  -65.6 -138.1    8.4    5.2    2.1
    85.5  114.5   56.5  113.6   99.4   19.1   94.1  -10.4 -167.4 -170.0 -177.7
   109.5  147.0   92.7  148.8   45.5 -169.6   44.4  164.3  -30.1  -20.4  -10.5
$$
  wtzr
$$ Complete FES2004
$$ wettzell,                            lon/lat:   12.8789   49.1442    0.000
  .00631 .00202 .00134 .00055 .00256 .00178 .00085 .00034 .00070 .00039 .00035
  .00127 .00042 .00028 .00012 .00059 .00045 .00019 .00008 .00010 .00004 .00003
  .00086 .00027 .00020 .00007 .00041 .00024 .00013 .00004 .00005 .00003 .00002
   -51.4  -26.7  -69.6  -28.0   71.0   -6.6   68.9  -35.9  -10.4   -6.8   -2.2
    81.5  117.7   60.1  114.5  115.5   29.4  110.3  -10.9 -162.6 -166.2 -177.9
    98.0  127.4   81.7  127.9   70.1  -53.0   69.6 -100.8  -36.3  -24.3  -11.2
$$ END TABLE
"""

# Sample IGS ERP (version 2) file
_ERP_TEXT = """\
version 2
EOP SOLUTION
  MJD      Xpole   Ypole  UT1-UTC    LOD  Xsig  Ysig   UTsig LODsig  Nr Nf Nt     Xrt    Yrt  Xrtsig Yrtsig
               10**-6"        .1us    .1us/d    10**-6"     .1us  .1us/d                10**-6"/d    10**-6"/d
 60310.50  100000  300000 -100000  10000   10   10   10   10  100  10  10   1000  -2000   10   10
 60311.50  110000  290000 -101000  12000   10   10   10   10  100  10  10   1500  -2500   10   10
"""


@pytest.fixture
def blq_file(tmp_path):
    """ Returns path to a sample BLQ file """
    path = tmp_path / 'stations.blq'
    path.write_text(_BLQ_TEXT)
    return path


@pytest.fixture
def erp_file(tmp_path):
    """ Returns path to a sample ERP file """
    path = tmp_path / 'igs.erp'
    path.write_text(_ERP_TEXT)
    return path


@pytest.fixture
def onsa_xyz():
    """ Returns ECEF coordinates of the ONSA station """
    return np.array([3370658.5419, 711877.1496, 5349786.9542])


@pytest.fixture(autouse=True)
def restore_settings():
    """ Restores process-wide settings after each test """
    from pyTideDisp.config import _state

    options = _state.default_options
    warn_missing = _state.warn_missing
    yield
    _state.default_options = options
    _state.warn_missing = warn_missing
